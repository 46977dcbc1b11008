"""
Generate sample client ledgers for the trade reconciliation tool.

This script creates:
- client1.csv: 3 trades, 2 returns for client C1
- client2.csv: 3 trades, 2 returns for client C2
- Optionally the same ledgers as DBF files (--dbf)

Expected reconciliation results:
- Missing trades: 2 (one per client)
- Missing returns: 2 (one of them against an unknown position)
- Wrong return quantities: 1

Installation:
    pip install dbf

Usage:
    python generate_test_data.py [--dbf]
"""

import csv
import dbf
import os
import sys

# Each entry has: (client, type, reference, security, quantity, parent)

CLIENT1_RECORDS = [
    ("C1", "T", "ABC98765", "HK345675432", 3000, ""),
    ("C1", "T", "ABC98766", "US0378331005", 1500, ""),
    ("C1", "R", "ABC98766:1", "US0378331005", 1500, "ABC98766"),
    ("C1", "T", "ABC98767", "GB0002634946", 800, ""),
    ("C1", "R", "ABC98767:1", "GB0002634946", 800, "ABC98767"),
]

CLIENT2_RECORDS = [
    ("C2", "T", "XYZ12345", "HK345675432", 3000, ""),
    ("C2", "R", "XYZ12345:1", "HK345675432", 2000, "XYZ12345"),
    ("C2", "T", "XYZ12346", "US0378331005", 1500, ""),
    ("C2", "R", "XYZ12346:1", "US0378331005", 1000, "XYZ12346"),
    ("C2", "T", "XYZ12348", "JP3633400001", 500, ""),
]

EXPECTED_REPORT = [
    "Client C2 is missing a trade of 800 for security GB0002634946",
    "Client C1 is missing a trade of 500 for security JP3633400001",
    "Client C2 is missing a return for 800 on position unknown",
    "Client C1 is missing a return for 2000 on position ABC98765",
    "Client C2 has a quantity of 1000 on return XYZ12346:1 that should be 1500",
]

DBF_STRUCTURE = (
    "CLIENT C(20); TYPE C(1); REFERENCE C(40); SECURITY C(20); "
    "QUANTITY N(15,0); PARENT C(40)"
)


def generate_client_csv(filename, records):
    """Write a headerless six-column client ledger."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(records)

    print(f"Generated {filename} with {len(records)} records")


def generate_client_dbf(filename, records):
    """Write the same ledger as a DBF table."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    table = dbf.Table(filename, DBF_STRUCTURE)
    table.open(mode=dbf.READ_WRITE)

    for client, kind, reference, security, quantity, parent in records:
        table.append({
            "CLIENT": client,
            "TYPE": kind,
            "REFERENCE": reference,
            "SECURITY": security,
            "QUANTITY": quantity,
            "PARENT": parent,
        })

    table.close()
    print(f"Generated {filename} with {len(records)} records")


def main(argv=None):
    """Main function to generate all test data."""
    argv = sys.argv[1:] if argv is None else argv

    print("=" * 70)
    print("GENERATING TEST DATA FOR TRADE RECONCILIATION")
    print("=" * 70)
    print()

    print("1. Generating CSV ledgers...")
    generate_client_csv("client1.csv", CLIENT1_RECORDS)
    generate_client_csv("client2.csv", CLIENT2_RECORDS)
    print()

    if "--dbf" in argv:
        print("2. Generating DBF ledgers...")
        generate_client_dbf("client1.dbf", CLIENT1_RECORDS)
        generate_client_dbf("client2.dbf", CLIENT2_RECORDS)
        print()

    print("=" * 70)
    print("EXPECTED RECONCILIATION RESULTS:")
    print("=" * 70)
    for line in EXPECTED_REPORT:
        print(line)
    print("=" * 70)


if __name__ == "__main__":
    main()
