"""
TransactionDataFetcher — load-and-query facade over the analytics functions.

By default every query re-reads the source file, so each answer reflects the
file as it is at call time. Pass ``reuse=True`` to keep the first load until
:meth:`TransactionDataFetcher.reload` is called.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from transaction_fetcher.analytics import amounts, clients, compliance
from transaction_fetcher.analytics.common import group_by_transaction_number
from transaction_fetcher.data.schemas import Transaction
from transaction_fetcher.data.store import TransactionStore


class TransactionDataFetcher:
    """Answers the fixed set of transaction queries against one source file."""

    def __init__(
        self,
        source: str | Path | None = None,
        reuse: bool = False,
        verbose: bool = False,
    ) -> None:
        self.reuse = reuse
        self._store = TransactionStore(source, verbose=verbose)

    @property
    def source(self) -> Path:
        return self._store.source

    @property
    def verbose(self) -> bool:
        """Whether each load prints a summary line."""
        return self._store.verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        self._store.verbose = value

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def reload(self) -> TransactionStore:
        """Force a fresh read of the source."""
        return self._store.load()

    def _snapshot(self) -> list[Transaction]:
        if not (self.reuse and self._store.is_loaded):
            self.reload()
        return self._store.transactions

    def load_transactions(self) -> list[Transaction]:
        """All records in source order (a new list on every call)."""
        return list(self._snapshot())

    def group_by_transaction_number(self) -> dict[int, list[Transaction]]:
        return group_by_transaction_number(self._snapshot())

    # ------------------------------------------------------------------
    # Amount queries
    # ------------------------------------------------------------------

    def get_total_transaction_amount(self) -> float:
        return amounts.total_amount(self._snapshot())

    def get_total_transaction_amount_sent_by(self, sender_full_name: str) -> float:
        return amounts.total_amount_sent_by(self._snapshot(), sender_full_name)

    def get_max_transaction_amount(self) -> float:
        return amounts.max_amount(self._snapshot())

    def get_top3_transactions_by_amount(self) -> list[Transaction]:
        return amounts.top3_by_amount(self._snapshot())

    def get_top_sender(self) -> Optional[str]:
        return amounts.top_sender(self._snapshot())

    # ------------------------------------------------------------------
    # Client queries
    # ------------------------------------------------------------------

    def count_unique_clients(self) -> int:
        """Number of distinct transactions (legacy name, see clients module)."""
        return clients.count_unique_clients(self._snapshot())

    def count_distinct_transactions(self) -> int:
        return clients.count_distinct_transactions(self._snapshot())

    def get_transactions_by_beneficiary_name(self) -> dict[str, Transaction]:
        return clients.transactions_by_beneficiary(self._snapshot())

    # ------------------------------------------------------------------
    # Compliance queries
    # ------------------------------------------------------------------

    def has_open_compliance_issues(self, client_full_name: str) -> bool:
        return compliance.has_open_compliance_issues(self._snapshot(), client_full_name)

    def get_unsolved_issue_ids(self) -> set[int]:
        return compliance.unsolved_issue_ids(self._snapshot())

    def get_all_solved_issue_messages(self) -> list[str]:
        return compliance.all_solved_issue_messages(self._snapshot())
