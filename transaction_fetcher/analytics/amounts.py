"""
Amount analytics — totals, maximum, top transactions, top sender.

Totals count each transaction group once: a transfer reported with several
compliance issues appears as several rows but moves money only once.
"""
from __future__ import annotations

from typing import Optional, Sequence

from transaction_fetcher.analytics.common import representative_frame
from transaction_fetcher.config import TOP_N
from transaction_fetcher.data.loader import to_frame
from transaction_fetcher.data.schemas import Transaction
from transaction_fetcher.errors import EmptyDataError, InsufficientDataError


def total_amount(transactions: Sequence[Transaction]) -> float:
    """Sum of one representative amount per transaction group."""
    reps = representative_frame(transactions)
    return float(reps["amount"].sum())


def total_amount_sent_by(transactions: Sequence[Transaction], sender_full_name: str) -> float:
    """Sum of representative amounts for groups sent by ``sender_full_name``."""
    df = to_frame(transactions)
    sent = df[df["sender_full_name"] == sender_full_name]
    sent = sent.drop_duplicates(subset="transaction_number", keep="first")
    return float(sent["amount"].sum())


def max_amount(transactions: Sequence[Transaction]) -> float:
    """Highest amount over all individual records."""
    df = to_frame(transactions)
    if df.empty:
        raise EmptyDataError("no transactions to take a maximum over")
    return float(df["amount"].max())


def top_by_amount(transactions: Sequence[Transaction], n: int = TOP_N) -> list[Transaction]:
    """The ``n`` largest transactions, one record per group, amount descending.

    Equal amounts keep their source order.
    """
    reps = representative_frame(transactions)
    if len(reps) < n:
        raise InsufficientDataError(required=n, available=len(reps))
    top = reps.sort_values("amount", ascending=False, kind="stable").head(n)
    return [transactions[i] for i in top.index]


def top3_by_amount(transactions: Sequence[Transaction]) -> list[Transaction]:
    return top_by_amount(transactions, 3)


def top_sender(transactions: Sequence[Transaction]) -> Optional[str]:
    """Sender with the largest summed representative amount, or None if empty.

    Ties go to the sender whose first transaction appears earliest.
    """
    reps = representative_frame(transactions)
    if reps.empty:
        return None
    per_sender = reps.groupby("sender_full_name", sort=False)["amount"].sum()
    return str(per_sender.idxmax())
