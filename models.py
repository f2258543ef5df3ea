from datetime import datetime, timedelta, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from database import Base


def utcnow():
    return datetime.now(timezone.utc)


def tomorrow():
    return utcnow() + timedelta(days=1)


class InterviewBatchDB(Base):
    """
    Таблица наборов на интервью (батчей)
    """
    __tablename__ = "interview_batches"

    id = Column(Integer, primary_key=True, index=True)
    batch_id = Column(String(6), nullable=False, unique=True, index=True)  # 6 цифр, генерируется сервером
    company_name = Column(String, nullable=False)
    total_candidates_required = Column(Integer, nullable=False)
    domains = Column(String, nullable=False)
    skills = Column(JSON, nullable=False)
    interview_types = Column(JSON, nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=False)
    csv_file = Column(String, nullable=False)  # относительный путь к загруженному CSV
    note = Column(Text, nullable=False)
    interviewers = Column(JSON, nullable=False, default=dict)
    schedule = Column(JSON, nullable=False, default=dict)
    meeting_id = Column(String, nullable=True)
    test_day = Column(DateTime(timezone=True), nullable=False, default=tomorrow)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Кандидаты в порядке строк CSV
    candidates = relationship(
        "CandidateDB",
        back_populates="batch",
        order_by="CandidateDB.position",
        cascade="all, delete-orphan",
    )


class CandidateDB(Base):
    """
    Кандидаты внутри батча (своего публичного идентификатора нет)
    """
    __tablename__ = "batch_candidates"

    id = Column(Integer, primary_key=True)
    batch_pk = Column(Integer, ForeignKey("interview_batches.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    email = Column(String, nullable=False)
    test_score = Column(JSON, nullable=False, default=dict)
    interview_score = Column(JSON, nullable=False, default=dict)
    time = Column(DateTime(timezone=True), nullable=True)

    batch = relationship("InterviewBatchDB", back_populates="candidates")
