"""
Grouping helpers and JSON conversion shared by the query modules.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd
from pydantic import BaseModel

from transaction_fetcher.data.loader import to_frame
from transaction_fetcher.data.schemas import Transaction


def group_by_transaction_number(transactions: Sequence[Transaction]) -> dict[int, list[Transaction]]:
    """Map each transaction number to all records carrying it, in source order."""
    if not transactions:
        return {}
    df = to_frame(transactions)
    positions = df.groupby("transaction_number", sort=False).indices
    return {
        int(number): [transactions[i] for i in idx]
        for number, idx in positions.items()
    }


def representative_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """First row of each transaction group, in order of first appearance.

    Group members share amount and parties, so any one of them stands for
    the whole transfer in amount queries.
    """
    df = to_frame(transactions)
    return df.drop_duplicates(subset="transaction_number", keep="first")


def representatives(transactions: Sequence[Transaction]) -> list[Transaction]:
    """One record per transaction group."""
    reps = representative_frame(transactions)
    return [transactions[i] for i in reps.index]


def sanitize_for_json(obj):
    """Recursively convert models, numpy/pandas types, and sets to JSON-native values."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (set, frozenset)):
        return sorted(sanitize_for_json(v) for v in obj)
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        obj = float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, float):
        return None if (math.isnan(obj) or math.isinf(obj)) else obj
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
