"""Trade reconciliation - compare two clients' trade and return ledgers."""

import logging
import sys
from typing import List

from config.settings import settings
from core.errors import ReconciliationError
from core.models import ClientIndex, Discrepancy
from core.reconciliation import organize, reconcile
from core.report import log_summary, print_report
from processors.loader import load_records

logger = logging.getLogger(__name__)


def load_client(path: str) -> ClientIndex:
    """Load one client ledger and index it."""
    return organize(load_records(path))


def run(path_a: str, path_b: str) -> List[Discrepancy]:
    ca = load_client(path_a)
    cb = load_client(path_b)

    discrepancies = reconcile(ca, cb)
    print_report(discrepancies)
    log_summary(discrepancies, [ca, cb])
    return discrepancies


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(settings.CLIENT_A_PATH, settings.CLIENT_B_PATH)
    except (OSError, ReconciliationError) as e:
        logger.error(f"Reconciliation aborted: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
