"""Pick the processor that matches a ledger file."""

from pathlib import Path
from typing import List, Union

from config.settings import settings
from core.models import Record

from .csv_processor import CSVProcessor
from .dbf_processor import DBFProcessor


def get_processor(path: str) -> Union[CSVProcessor, DBFProcessor]:
    if Path(path).suffix.lower() == ".dbf":
        return DBFProcessor(path)
    return CSVProcessor(path, delimiter=settings.CSV_DELIMITER)


def load_records(path: str) -> List[Record]:
    return get_processor(path).load_records()
