from typing import Dict, List

from exceptions import CsvIngestError


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """
    Разбирает CSV в список словарей "заголовок -> значение".

    Разбор наивный: строки по '\\n', поля по ','. Кавычки не поддерживаются,
    запятая внутри значения ломает строку. Пустые строки пропускаются.
    Если полей меньше, чем заголовков, недостающих ключей в строке нет;
    лишние поля отбрасываются.
    """
    lines = [line for line in text.split("\n") if line.strip() != ""]
    if not lines:
        raise CsvIngestError("CSV file is empty")

    headers = lines[0].split(",")

    rows = []
    for line in lines[1:]:
        values = line.split(",")
        rows.append(dict(zip(headers, values)))
    return rows


def read_csv_rows(file_path: str) -> List[Dict[str, str]]:
    """
    Читает CSV-файл целиком, переводы строк не преобразуются.
    Ошибки чтения (нет файла, нет прав) пробрасываются как OSError.
    """
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return parse_csv_text(text)
