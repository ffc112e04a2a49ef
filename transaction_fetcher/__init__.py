"""Transaction Fetcher — load transaction records and answer analytical queries."""

__version__ = "1.0.0"
