"""
Compliance-issue analytics — open issues per client, issue ids, messages.

Unlike amount queries these scan every record: each row of a transaction
group carries its own issue.
"""
from __future__ import annotations

from typing import Sequence

from transaction_fetcher.data.loader import to_frame
from transaction_fetcher.data.schemas import Transaction


def has_open_compliance_issues(transactions: Sequence[Transaction], client_full_name: str) -> bool:
    """True if the client, as sender or beneficiary, has any unsolved issue."""
    df = to_frame(transactions)
    involved = (df["sender_full_name"] == client_full_name) | (df["beneficiary_full_name"] == client_full_name)
    return bool(df.loc[involved, "issue_solved"].eq(False).any())


def unsolved_issue_ids(transactions: Sequence[Transaction]) -> set[int]:
    """Distinct ids of unsolved issues; records without an id are skipped."""
    df = to_frame(transactions)
    open_ids = df.loc[df["issue_solved"].eq(False), "issue_id"].dropna()
    return {int(i) for i in open_ids.unique()}


def all_solved_issue_messages(transactions: Sequence[Transaction]) -> list[str]:
    """Messages of solved issues in source order, skipping null messages."""
    df = to_frame(transactions)
    solved = df["issue_solved"].eq(True) & df["issue_message"].notna()
    return df.loc[solved, "issue_message"].tolist()
