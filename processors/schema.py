"""
Mapping between raw ledger rows and the record model.

Processors only deal with their file format; they hand this module a
field-name -> raw-value mapping and get a validated ``Record`` back.
"""

from typing import Any, Mapping, Optional

from core.errors import MalformedRecordError
from core.models import Kind, Record

FIELDS = ("Client", "TradeOrReturn", "Reference", "Security", "Quantity", "Parent")
REQUIRED_FIELDS = FIELDS[:-1]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _quantity(value: Any, source: str, line: int, unit: str) -> int:
    if isinstance(value, bool):
        raise MalformedRecordError(source, line, f"invalid quantity {value!r}", unit)

    if isinstance(value, float):
        if not value.is_integer():
            raise MalformedRecordError(source, line, f"quantity {value} is not a whole number", unit)
        quantity = int(value)
    elif isinstance(value, int):
        quantity = value
    else:
        try:
            quantity = int(_text(value))
        except ValueError:
            raise MalformedRecordError(source, line, f"invalid quantity {value!r}", unit) from None

    if quantity < 0:
        raise MalformedRecordError(source, line, f"negative quantity {quantity}", unit)
    return quantity


def build_record(values: Mapping[str, Any], source: str, line: int, unit: str = "line") -> Record:
    """Validate one raw row and build the matching record."""
    for name in REQUIRED_FIELDS:
        if not _text(values.get(name)):
            raise MalformedRecordError(source, line, f"missing {name}", unit)

    code = _text(values["TradeOrReturn"])
    try:
        kind = Kind.from_code(code)
    except ValueError:
        raise MalformedRecordError(source, line, f"unknown record type {code!r}", unit) from None

    parent: Optional[str] = _text(values.get("Parent")) or None

    return Record(
        client=_text(values["Client"]),
        kind=kind,
        reference=_text(values["Reference"]),
        security=_text(values["Security"]),
        quantity=_quantity(values["Quantity"], source, line, unit),
        parent=parent,
    )
