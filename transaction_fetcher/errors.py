"""
Exception hierarchy for loading and querying transactions.
"""
from __future__ import annotations


class TransactionFetcherError(Exception):
    """Base class for every error raised by this package."""


class DataSourceError(TransactionFetcherError):
    """The transaction source is missing, unreadable, or malformed."""


class EmptyDataError(TransactionFetcherError):
    """A query needs at least one record but the dataset is empty."""


class InsufficientDataError(TransactionFetcherError):
    """A query needs more transaction groups than the dataset holds."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"need at least {required} transactions, found {available}"
        )
