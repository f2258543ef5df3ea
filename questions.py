import json
import logging
import os
import random
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from config import QUESTIONS_DIR, RANDOM_QUESTIONS_COUNT

logger = logging.getLogger(__name__)

router = APIRouter()


def get_questions_dir() -> str:
    return QUESTIONS_DIR


def load_questions(questions_dir: str) -> List[Any]:
    """
    Загружает вопросы из всех файлов каталога и склеивает в один список.
    Кэша нет: корпус читается заново при каждом запросе.
    """
    all_questions = []
    for file_name in sorted(os.listdir(questions_dir)):
        file_path = os.path.join(questions_dir, file_name)
        if not os.path.isfile(file_path):
            continue
        with open(file_path, "r", encoding="utf-8") as f:
            questions = json.load(f)
        if isinstance(questions, list):
            all_questions.extend(questions)
        else:
            all_questions.append(questions)
    return all_questions


def sample_questions(questions: List[Dict[str, Any]], count: int = RANDOM_QUESTIONS_COUNT) -> List[Dict[str, Any]]:
    """
    Перемешивает вопросы на месте, берёт первые count и нумерует с 1.
    """
    random.shuffle(questions)
    return [
        {**question, "questionNumber": number}
        for number, question in enumerate(questions[:count], start=1)
    ]


# 📌 **20 случайных вопросов**
@router.get("/random20")
def get_random_questions(questions_dir: str = Depends(get_questions_dir)):
    try:
        return sample_questions(load_questions(questions_dir))
    except Exception as e:
        logger.exception("Ошибка загрузки вопросов")
        raise HTTPException(status_code=500, detail=str(e))


# 📌 **Все вопросы**
@router.get("/questions")
def get_all_questions(questions_dir: str = Depends(get_questions_dir)):
    try:
        return load_questions(questions_dir)
    except Exception as e:
        logger.exception("Ошибка загрузки вопросов")
        raise HTTPException(status_code=500, detail=str(e))


# 📌 **Один случайный вопрос**
@router.get("/random")
def get_random_question(questions_dir: str = Depends(get_questions_dir)):
    try:
        questions = load_questions(questions_dir)
    except Exception as e:
        logger.exception("Ошибка загрузки вопросов")
        raise HTTPException(status_code=500, detail=str(e))

    if not questions:
        raise HTTPException(status_code=404, detail="No questions found")
    return random.choice(questions)
