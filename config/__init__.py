"""Runtime configuration for the trade reconciliation tool."""
