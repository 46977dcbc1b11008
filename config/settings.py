import os


class Settings:
    """Configuration settings for the trade reconciliation run."""

    # Client ledger paths
    CLIENT_A_PATH = os.getenv("CLIENT_A_PATH", "client1.csv")
    CLIENT_B_PATH = os.getenv("CLIENT_B_PATH", "client2.csv")

    # Delimited file format
    CSV_DELIMITER = os.getenv("CSV_DELIMITER", ",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


# Create a singleton instance
settings = Settings()
