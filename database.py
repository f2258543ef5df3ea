from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import DATABASE_URL, SQL_ECHO

if not DATABASE_URL:
    raise ValueError("Переменная окружения DATABASE_URL не установлена! Убедитесь, что файл .env настроен.")

# SQLite нужен check_same_thread=False: FastAPI выполняет sync-хендлеры в пуле потоков
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

try:
    # Создание движка SQLAlchemy
    engine = create_engine(DATABASE_URL, echo=SQL_ECHO, pool_pre_ping=True, connect_args=connect_args)

    # Создание фабрики сессий
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Базовый класс для моделей
    Base = declarative_base()

except Exception as e:
    raise RuntimeError(f"Ошибка подключения к базе данных: {str(e)}")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
