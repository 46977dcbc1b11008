"""Data model for client trade and return records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Kind(Enum):
    """Record kind, valued by its code in the client files."""
    TRADE = "T"
    RETURN = "R"

    @classmethod
    def from_code(cls, code: str) -> "Kind":
        return cls(code.strip().upper())


@dataclass(frozen=True)
class Record:
    client: str
    kind: Kind
    reference: str
    security: str
    quantity: int
    # Only returns link back to their originating trade reference
    parent: Optional[str] = None


@dataclass
class ClientIndex:
    """
    One client's records keyed by kind, then by security.

    A later record with the same kind and security replaces the earlier one;
    every replacing record is kept in ``duplicates`` so the run can flag it.
    """
    client: str
    trades: Dict[str, Record] = field(default_factory=dict)
    returns: Dict[str, Record] = field(default_factory=dict)
    duplicates: List[Record] = field(default_factory=list)

    def by_kind(self, kind: Kind) -> Dict[str, Record]:
        return self.trades if kind is Kind.TRADE else self.returns

    def get(self, kind: Kind, security: str) -> Optional[Record]:
        return self.by_kind(kind).get(security)


class DiscrepancyKind(Enum):
    MISSING_TRADE = "missing_trade"
    MISSING_RETURN = "missing_return"
    WRONG_RETURN_QUANTITY = "wrong_return_quantity"


@dataclass(frozen=True)
class Discrepancy:
    kind: DiscrepancyKind
    client: str
    security: str
    expected_quantity: int
    reference: Optional[str] = None
    actual_quantity: Optional[int] = None
