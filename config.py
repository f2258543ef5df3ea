import os
from pathlib import Path
from dotenv import load_dotenv

# Корень проекта (здесь же лежит .env)
BASE_DIR = Path(__file__).resolve().parent

load_dotenv(BASE_DIR / ".env")

# База данных
DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

# Файлы
UPLOAD_DIR = os.getenv("UPLOAD_DIR", str(BASE_DIR / "uploads" / "csv"))
QUESTIONS_DIR = os.getenv("QUESTIONS_DIR", str(BASE_DIR / "data" / "questions"))

# Генерация batchId
BATCH_ID_MIN = 100000
BATCH_ID_MAX = 999999
BATCH_ID_MAX_ATTEMPTS = int(os.getenv("BATCH_ID_MAX_ATTEMPTS", 50))

# Размер случайной выборки вопросов
RANDOM_QUESTIONS_COUNT = 20

# CORS и логи
FRONTEND_URL = os.getenv("FRONTEND_URL")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", str(BASE_DIR / "logs"))
