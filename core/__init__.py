"""
Trade/return reconciliation core.

This package provides:
- The record data model (trades, returns, discrepancies)
- Indexing of a client's records by kind and security
- Symmetric comparison checks between two clients
- Plain-text reporting of discrepancies
"""

__version__ = "1.0.0"
