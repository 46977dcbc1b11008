import csv
import logging
from typing import Iterator, List

from core.errors import MalformedRecordError
from core.models import Record

from .schema import FIELDS, build_record

logger = logging.getLogger(__name__)


class CSVProcessor:
    """
    Reads a headerless delimited client ledger.

    Columns are positional, in ``FIELDS`` order. The trailing Parent
    column may be left off entirely.
    """

    def __init__(self, path: str, delimiter: str = ","):
        self.path = path
        self.delimiter = delimiter

    def _decoded_lines(self, f) -> Iterator[str]:
        # Decode line by line so an encoding error names its own line
        for number, raw in enumerate(f, start=1):
            try:
                # utf-8-sig drops a leading byte order mark
                yield raw.decode("utf-8-sig" if number == 1 else "utf-8")
            except UnicodeDecodeError as e:
                raise MalformedRecordError(self.path, number, f"not valid UTF-8 ({e.reason})") from None

    def read_records(self) -> Iterator[Record]:
        with open(self.path, "rb") as f:
            reader = csv.reader(self._decoded_lines(f), delimiter=self.delimiter)
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    return
                except csv.Error as e:
                    raise MalformedRecordError(self.path, reader.line_num, str(e)) from None

                line = reader.line_num
                if not any(cell.strip() for cell in row):
                    raise MalformedRecordError(self.path, line, "empty record")

                if len(row) not in (len(FIELDS), len(FIELDS) - 1):
                    raise MalformedRecordError(
                        self.path, line,
                        f"expected {len(FIELDS)} columns, found {len(row)}",
                    )

                yield build_record(dict(zip(FIELDS, row)), self.path, line)

    def load_records(self) -> List[Record]:
        records = list(self.read_records())
        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records
