import logging
from typing import Callable, Iterable, List

from .errors import EmptyRecordSetError
from .models import ClientIndex, Discrepancy, DiscrepancyKind, Kind, Record

logger = logging.getLogger(__name__)

UNKNOWN_REFERENCE = "unknown"

Check = Callable[[ClientIndex, ClientIndex], List[Discrepancy]]


def organize(records: Iterable[Record]) -> ClientIndex:
    """
        Index a client's records by kind and security.
    """
    records = list(records)
    if not records:
        raise EmptyRecordSetError("cannot organize an empty record set")

    index = ClientIndex(client=records[0].client)

    for record in records:
        if record.client != index.client:
            logger.warning(
                f"Record {record.reference} belongs to client {record.client}, "
                f"indexing it under {index.client}"
            )

        by_security = index.by_kind(record.kind)
        if record.security in by_security:
            logger.warning(
                f"Client {index.client} has more than one {record.kind.name.lower()} "
                f"for security {record.security}; keeping {record.reference}"
            )
            index.duplicates.append(record)
        by_security[record.security] = record

    logger.info(
        f"Organized client {index.client}: "
        f"{len(index.trades)} trades, {len(index.returns)} returns"
    )
    return index


def check_missing(ca: ClientIndex, cb: ClientIndex, kind: Kind) -> List[Discrepancy]:
    """
        Report every security recorded as ``kind`` by ca but not by cb.
    """
    found = []
    other = cb.by_kind(kind)

    for security, record in ca.by_kind(kind).items():
        if security in other:
            continue

        if kind is Kind.TRADE:
            found.append(Discrepancy(
                kind=DiscrepancyKind.MISSING_TRADE,
                client=cb.client,
                security=security,
                expected_quantity=record.quantity,
            ))
        else:
            # Position the return should have been booked against
            position = cb.get(Kind.TRADE, security)
            found.append(Discrepancy(
                kind=DiscrepancyKind.MISSING_RETURN,
                client=cb.client,
                security=security,
                expected_quantity=record.quantity,
                reference=position.reference if position else UNKNOWN_REFERENCE,
            ))

    return found


def check_missing_trades(ca: ClientIndex, cb: ClientIndex) -> List[Discrepancy]:
    return check_missing(ca, cb, Kind.TRADE)


def check_missing_returns(ca: ClientIndex, cb: ClientIndex) -> List[Discrepancy]:
    return check_missing(ca, cb, Kind.RETURN)


def check_wrong_return_quantities(ca: ClientIndex, cb: ClientIndex) -> List[Discrepancy]:
    """
        Report returns that cb books with a smaller quantity than ca.

        A larger quantity on cb's side is tolerated.
    """
    found = []

    for security, expected in ca.returns.items():
        actual = cb.returns.get(security)
        if actual is None or actual.quantity >= expected.quantity:
            continue

        found.append(Discrepancy(
            kind=DiscrepancyKind.WRONG_RETURN_QUANTITY,
            client=cb.client,
            security=security,
            expected_quantity=expected.quantity,
            reference=actual.reference,
            actual_quantity=actual.quantity,
        ))

    return found


CHECKS: List[Check] = [
    check_missing_trades,
    check_missing_returns,
    check_wrong_return_quantities,
]


def reconcile(ca: ClientIndex, cb: ClientIndex) -> List[Discrepancy]:
    """Run every check in both directions, in report order."""
    discrepancies = []
    for check in CHECKS:
        discrepancies.extend(check(ca, cb))
        discrepancies.extend(check(cb, ca))
    return discrepancies
