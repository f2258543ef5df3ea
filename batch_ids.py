import logging
import random

from sqlalchemy.orm import Session

from config import BATCH_ID_MAX, BATCH_ID_MAX_ATTEMPTS, BATCH_ID_MIN
from exceptions import BatchIdExhaustedError
from models import InterviewBatchDB

logger = logging.getLogger(__name__)


def batch_id_exists(db: Session, batch_id: str) -> bool:
    return db.query(InterviewBatchDB.id).filter(InterviewBatchDB.batch_id == batch_id).first() is not None


def generate_unique_batch_id(
    db: Session,
    low: int = BATCH_ID_MIN,
    high: int = BATCH_ID_MAX,
    max_attempts: int = BATCH_ID_MAX_ATTEMPTS,
) -> str:
    """
    Генерирует batchId из [low, high], которого ещё нет в базе.

    Сначала max_attempts случайных попыток; если все заняты, выбираем
    случайный из оставшихся свободных. Если свободных нет, BatchIdExhaustedError.
    Между проверкой и вставкой возможна гонка: её ловит UNIQUE на batch_id.
    """
    for _ in range(max_attempts):
        batch_id = str(random.randint(low, high))
        if not batch_id_exists(db, batch_id):
            return batch_id

    logger.warning(f"{max_attempts} попыток подряд дали занятый batchId, ищем свободный перебором")

    used = {
        value
        for (value,) in db.query(InterviewBatchDB.batch_id)
        .filter(InterviewBatchDB.batch_id.between(str(low), str(high)))
        .all()
    }
    free = [value for value in range(low, high + 1) if str(value) not in used]
    if not free:
        raise BatchIdExhaustedError(
            f"No free batch id left in range {low}-{high}",
            details={"low": low, "high": high},
        )
    return str(random.choice(free))
