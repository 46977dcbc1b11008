"""Plain-text reporting of reconciliation discrepancies."""

import logging
import sys
from typing import Dict, List, Optional, Sequence, TextIO

from .models import ClientIndex, Discrepancy, DiscrepancyKind

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATES: Dict[DiscrepancyKind, str] = {
    DiscrepancyKind.MISSING_TRADE: (
        "Client {client} is missing a trade of {expected} for security {security}"
    ),
    DiscrepancyKind.MISSING_RETURN: (
        "Client {client} is missing a return for {expected} on position {reference}"
    ),
    DiscrepancyKind.WRONG_RETURN_QUANTITY: (
        "Client {client} has a quantity of {actual} on return {reference} "
        "that should be {expected}"
    ),
}


def format_discrepancy(discrepancy: Discrepancy) -> str:
    return MESSAGE_TEMPLATES[discrepancy.kind].format(
        client=discrepancy.client,
        security=discrepancy.security,
        expected=discrepancy.expected_quantity,
        actual=discrepancy.actual_quantity,
        reference=discrepancy.reference,
    )


def print_report(discrepancies: Sequence[Discrepancy], stream: Optional[TextIO] = None) -> int:
    """
        Print one line per discrepancy and return how many were printed.
    """
    stream = stream or sys.stdout
    for discrepancy in discrepancies:
        print(format_discrepancy(discrepancy), file=stream)
    return len(discrepancies)


def log_summary(
    discrepancies: Sequence[Discrepancy],
    indexes: List[ClientIndex],
) -> None:
    counts = {kind: 0 for kind in DiscrepancyKind}
    for discrepancy in discrepancies:
        counts[discrepancy.kind] += 1

    logger.info("=" * 70)
    logger.info("RECONCILIATION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Clients:                     {' vs '.join(i.client for i in indexes)}")
    logger.info(f"Total Discrepancies:         {len(discrepancies)}")
    logger.info(f"  - Missing Trades:          {counts[DiscrepancyKind.MISSING_TRADE]}")
    logger.info(f"  - Missing Returns:         {counts[DiscrepancyKind.MISSING_RETURN]}")
    logger.info(f"  - Wrong Return Quantities: {counts[DiscrepancyKind.WRONG_RETURN_QUANTITY]}")
    for index in indexes:
        logger.info(f"Duplicates in {index.client}: {len(index.duplicates)}")
    logger.info("=" * 70)
