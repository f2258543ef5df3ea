import os
import tempfile
from datetime import datetime, timezone

# Окружение задаётся до импорта приложения: config читает его при импорте
TEST_DIR = tempfile.mkdtemp(prefix="interview-batches-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(TEST_DIR, "uploads")
os.environ["QUESTIONS_DIR"] = os.path.join(TEST_DIR, "questions")
os.environ["LOG_DIR"] = os.path.join(TEST_DIR, "logs")

import pytest
from fastapi.testclient import TestClient

from app import app
from database import Base, SessionLocal, engine
from models import CandidateDB, InterviewBatchDB
from questions import get_questions_dir
from routes import get_upload_dir


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def upload_dir(tmp_path):
    # Каталог не создаётся заранее: его должен создать сервер
    return str(tmp_path / "uploads" / "csv")


@pytest.fixture
def questions_dir(tmp_path):
    path = tmp_path / "questions"
    path.mkdir()
    return path


@pytest.fixture
def client(upload_dir, questions_dir):
    app.dependency_overrides[get_upload_dir] = lambda: upload_dir
    app.dependency_overrides[get_questions_dir] = lambda: str(questions_dir)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_batch(db_session):
    """Создаёт батч напрямую в базе, в обход HTTP."""
    def factory(batch_id, emails=()):
        batch = InterviewBatchDB(
            batch_id=batch_id,
            company_name="Acme",
            total_candidates_required=3,
            domains="backend",
            skills=["python"],
            interview_types=["technical"],
            deadline=datetime(2030, 1, 1, tzinfo=timezone.utc),
            csv_file="uploads/csv/seed.csv",
            note="seed",
            candidates=[
                CandidateDB(position=index, email=email)
                for index, email in enumerate(emails)
            ],
        )
        db_session.add(batch)
        db_session.commit()
        return batch
    return factory
