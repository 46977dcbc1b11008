"""Exceptions raised while loading and organizing client records."""


class ReconciliationError(Exception):
    """Base class for errors that abort a reconciliation run."""


class MalformedRecordError(ReconciliationError, ValueError):
    # unit is "line" for text ledgers, "row" for tables that skip deleted records
    def __init__(self, source: str, line: int, reason: str, unit: str = "line"):
        self.source = source
        self.line = line
        self.reason = reason
        self.unit = unit
        super().__init__(f"Malformed record in {source} at {unit} {line}: {reason}")


class EmptyRecordSetError(ReconciliationError, ValueError):
    pass
