import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import FRONTEND_URL
from database import Base, engine
from exceptions import global_exception_handler, http_exception_handler, validation_exception_handler
from logger import setup_logger
from questions import router as questions_router
from routes import router as batch_router

setup_logger()
logger = logging.getLogger(__name__)

# Инициализация FastAPI
app = FastAPI(
    title="Interview Batch Service",
    description="Наборы кандидатов на интервью из CSV и случайные вопросы для теста",
    version="1.0.0"
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Разрешение CORS для фронтенда
app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_URL] if FRONTEND_URL else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Создание таблиц в базе данных
Base.metadata.create_all(bind=engine)

app.include_router(batch_router)
app.include_router(questions_router)


@app.get("/", response_class=HTMLResponse)
def root():
    return "<h1>Interview Batch Service</h1><p>Перейдите в <a href='/docs'>/docs</a> для API документации.</p>"


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
