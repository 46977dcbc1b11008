"""Readers that turn client ledger files into reconciliation records."""
