"""
TransactionStore — one validated snapshot of the transaction file.

Holds the records in source order; queries build their frames from them.
A store never refreshes itself; callers decide when to load again.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from transaction_fetcher.config import DATA_FILE
from transaction_fetcher.data.loader import load_transactions
from transaction_fetcher.data.schemas import Transaction


class TransactionStore:
    """In-memory transaction records."""

    def __init__(self, source: Optional[Path] = None, verbose: bool = True) -> None:
        self.source: Path = Path(source) if source is not None else DATA_FILE
        self.verbose = verbose
        self.transactions: list[Transaction] = []
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> "TransactionStore":
        """Read and validate the source, replacing any previous snapshot.

        On failure the previous snapshot is left untouched.
        """
        self.transactions = load_transactions(self.source)
        self._loaded = True

        if self.verbose:
            print(f"  Loaded {len(self.transactions):,} records "
                  f"({self.group_count():,} transactions) from {self.source}")
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def group_count(self) -> int:
        return len({t.transaction_number for t in self.transactions})
