import json
import logging
import os
from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from batch_ids import generate_unique_batch_id
from config import BASE_DIR, UPLOAD_DIR
from csv_ingest import read_csv_rows
from database import get_db
from exceptions import AppError, format_validation_errors
from models import CandidateDB, InterviewBatchDB, tomorrow
from schemas import CandidateResponse, InterviewBatchCreate, InterviewBatchCreated, MessageResponse
from uploads import stored_upload

logger = logging.getLogger(__name__)

router = APIRouter()


def get_upload_dir() -> str:
    return UPLOAD_DIR


def relative_upload_path(file_path: str) -> str:
    return os.path.relpath(file_path, BASE_DIR).replace("\\", "/")


def error_message(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return format_validation_errors(error.errors())
    return str(error)


def save_interview_batch(db: Session, data: InterviewBatchCreate) -> InterviewBatchDB:
    """
    Сохраняет батч вместе с кандидатами (порядок = порядок строк CSV).
    """
    batch = InterviewBatchDB(
        batch_id=data.batch_id,
        company_name=data.company_name,
        total_candidates_required=data.total_candidates_required,
        domains=data.domains,
        skills=data.skills,
        interview_types=data.interview_types,
        deadline=data.deadline,
        csv_file=data.csv_file,
        note=data.note,
        interviewers=data.interviewers,
        schedule=data.schedule,
        meeting_id=data.meeting_id,
        test_day=data.test_day or tomorrow(),
        candidates=[
            CandidateDB(
                position=index,
                email=candidate.email,
                test_score=candidate.test_score,
                interview_score=candidate.interview_score,
                time=candidate.time,
            )
            for index, candidate in enumerate(data.candidates)
        ],
    )

    db.add(batch)
    db.commit()
    db.refresh(batch)
    return batch


# 📌 1️⃣ **Создание батча из формы и CSV с кандидатами**
@router.post(
    "/interviewBatch",
    status_code=201,
    response_model=InterviewBatchCreated,
    responses={400: {"model": MessageResponse}},
)
def create_interview_batch(
    companyName: str = Form(...),
    totalCandidatesRequired: str = Form(...),
    domains: str = Form(...),
    skills: str = Form(...),
    interviewTypes: str = Form(...),
    deadline: str = Form(...),
    note: str = Form(...),
    csvFile: UploadFile = File(...),
    db: Session = Depends(get_db),
    upload_dir: str = Depends(get_upload_dir),
):
    """
    Сохраняет CSV, генерирует batchId, разбирает кандидатов и создаёт батч.
    При любой ошибке загруженный файл удаляется, клиент получает 400.
    """
    try:
        with stored_upload(csvFile.file, csvFile.filename, upload_dir) as file_path:
            batch_id = generate_unique_batch_id(db)
            rows = read_csv_rows(file_path)

            batch_data = InterviewBatchCreate.model_validate({
                "batchId": batch_id,
                "companyName": companyName,
                "totalCandidatesRequired": totalCandidatesRequired,
                "domains": domains,
                "skills": json.loads(skills),
                "interviewTypes": json.loads(interviewTypes),
                "deadline": deadline,
                "csvFile": relative_upload_path(file_path),
                "note": note,
                "candidates": rows,
            })
            batch = save_interview_batch(db, batch_data)
    except Exception as e:
        db.rollback()
        details = e.details if isinstance(e, AppError) else {}
        logger.exception(f"Ошибка создания батча: {e} {details}")
        raise HTTPException(status_code=400, detail=error_message(e))

    logger.info(f"Батч {batch.batch_id} создан, кандидатов: {len(batch.candidates)}")
    return InterviewBatchCreated(message="Interview batch created successfully", batchId=batch.batch_id)


# 📌 2️⃣ **Отдача загруженного CSV**
@router.get("/getCSVFile/{filename}", responses={404: {"model": MessageResponse}})
def get_csv_file(filename: str, upload_dir: str = Depends(get_upload_dir)):
    file_path = os.path.join(upload_dir, os.path.basename(filename))
    if not os.path.isfile(file_path):
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(file_path)


# 📌 3️⃣ **Кандидаты и их оценки по batchId**
@router.get(
    "/getScores/{batchId}",
    response_model=List[CandidateResponse],
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def get_scores(batchId: str, db: Session = Depends(get_db)):
    try:
        batch = db.query(InterviewBatchDB).filter(InterviewBatchDB.batch_id == batchId).first()
        candidates = list(batch.candidates) if batch else None
    except SQLAlchemyError:
        logger.exception("Ошибка получения оценок кандидатов")
        raise HTTPException(status_code=500, detail="Error fetching candidate scores")

    if batch is None:
        raise HTTPException(status_code=404, detail="Batch not found")

    return [
        CandidateResponse(
            email=candidate.email,
            test_score=candidate.test_score,
            interview_score=candidate.interview_score,
            time=candidate.time,
        )
        for candidate in candidates
    ]
