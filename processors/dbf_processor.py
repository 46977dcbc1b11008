import logging
from dbfread import DBF  # type: ignore
from typing import Dict, Iterator, List

from core.models import Record

from .schema import build_record

logger = logging.getLogger(__name__)

# Record field -> dBase column
DBF_COLUMNS: Dict[str, str] = {
    "Client": "CLIENT",
    "TradeOrReturn": "TYPE",
    "Reference": "REFERENCE",
    "Security": "SECURITY",
    "Quantity": "QUANTITY",
    "Parent": "PARENT",
}


class DBFProcessor:
    def __init__(self, path: str):
        self.path = path

    def read_records(self) -> Iterator[Record]:
        table = DBF(self.path, load=False)
        # dbfread skips deleted records, so this counts live rows only
        for row_number, row in enumerate(table, start=1):
            values = {field: row.get(column) for field, column in DBF_COLUMNS.items()}
            yield build_record(values, self.path, row_number, unit="row")

    def load_records(self) -> List[Record]:
        records = list(self.read_records())
        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records
