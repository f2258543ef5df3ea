import logging
import os
import shutil
import time
from contextlib import contextmanager
from typing import BinaryIO

logger = logging.getLogger(__name__)


def make_upload_filename(original_filename: str) -> str:
    """
    Имя файла на диске: "<миллисекунды>-<исходное имя>".
    Уникальность не гарантирована при одновременной загрузке одноимённых файлов.
    """
    base_name = os.path.basename((original_filename or "").replace("\\", "/")) or "upload.csv"
    return f"{int(time.time() * 1000)}-{base_name}"


def save_upload(source: BinaryIO, original_filename: str, upload_dir: str) -> str:
    """
    Сохраняет загруженный файл в upload_dir (каталог создаётся при необходимости).
    Возвращает полный путь к файлу.
    """
    os.makedirs(upload_dir, exist_ok=True)
    file_path = os.path.join(upload_dir, make_upload_filename(original_filename))
    with open(file_path, "wb") as buffer:
        shutil.copyfileobj(source, buffer)
    return file_path


@contextmanager
def stored_upload(source: BinaryIO, original_filename: str, upload_dir: str):
    """
    Сохраняет файл и удаляет его, если внутри блока произошла ошибка.
    """
    file_path = save_upload(source, original_filename, upload_dir)
    try:
        yield file_path
    except Exception:
        try:
            os.remove(file_path)
            logger.info(f"Загруженный файл удалён после ошибки: {file_path}")
        except OSError as e:
            logger.error(f"Не удалось удалить файл {file_path}: {e}")
        raise
