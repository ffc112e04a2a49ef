"""
Client analytics — distinct transaction counts, beneficiary index.
"""
from __future__ import annotations

from typing import Sequence

from transaction_fetcher.data.loader import to_frame
from transaction_fetcher.data.schemas import Transaction


def count_distinct_transactions(transactions: Sequence[Transaction]) -> int:
    """Number of distinct transaction groups."""
    df = to_frame(transactions)
    return int(df["transaction_number"].nunique())


def count_unique_clients(transactions: Sequence[Transaction]) -> int:
    """Legacy name for :func:`count_distinct_transactions`.

    Despite the name this counts transaction groups, not people.
    """
    return count_distinct_transactions(transactions)


def transactions_by_beneficiary(transactions: Sequence[Transaction]) -> dict[str, Transaction]:
    """Index records by beneficiary name.

    When several records share a beneficiary the last one in source order
    wins; earlier records for that name are not returned.
    """
    by_name: dict[str, Transaction] = {}
    for t in transactions:
        by_name[t.beneficiary_full_name] = t
    return by_name
