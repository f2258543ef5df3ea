from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def number_to_str(value):
    # числа в списках строк приводятся к строкам, как при касте в [String]
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


CoercedStr = Annotated[str, BeforeValidator(number_to_str)]


class CamelModel(BaseModel):
    """
    Базовая схема: snake_case в Python, camelCase в JSON.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CandidateCreate(CamelModel):
    """
    Кандидат из строки CSV. Лишние колонки отбрасываются.
    """
    email: str = Field(min_length=1)
    test_score: Dict[str, Any] = Field(default_factory=dict)
    interview_score: Dict[str, Any] = Field(default_factory=dict)
    time: Optional[datetime] = None

    @field_validator("time", mode="before")
    @classmethod
    def empty_time_is_none(cls, value):
        # пустая ячейка CSV означает "время не назначено"
        if isinstance(value, str) and value.strip() == "":
            return None
        return value


class CandidateResponse(CandidateCreate):
    """
    Кандидат в ответе /getScores.
    """


class InterviewBatchCreate(CamelModel):
    """
    Схема создания батча: поля формы + сгенерированные сервером значения.
    """
    batch_id: str = Field(pattern=r"^[1-9][0-9]{5}$")
    company_name: str = Field(min_length=1)
    total_candidates_required: int = Field(ge=0)
    domains: str = Field(min_length=1)
    skills: List[CoercedStr]
    interview_types: List[CoercedStr]
    deadline: datetime
    csv_file: str = Field(min_length=1)
    note: str = Field(min_length=1)
    interviewers: Dict[str, Any] = Field(default_factory=dict)
    schedule: Dict[str, Any] = Field(default_factory=dict)
    meeting_id: Optional[str] = None
    test_day: Optional[datetime] = None
    candidates: List[CandidateCreate] = Field(default_factory=list)


class InterviewBatchCreated(BaseModel):
    """
    Ответ после создания батча.
    """
    message: str
    batchId: str


class MessageResponse(BaseModel):
    """
    Тело ошибок 400/404/500.
    """
    message: str
