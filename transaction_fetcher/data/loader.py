"""
JSON loading, strict validation, and frame construction.
"""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd
from pydantic import ValidationError

from transaction_fetcher.config import DATA_FILE, FRAME_COLUMNS, GROUP_CONSISTENCY_COLUMNS
from transaction_fetcher.data.schemas import Transaction, TransactionList
from transaction_fetcher.errors import DataSourceError


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _read_source(filepath: Path) -> bytes:
    try:
        return filepath.read_bytes()
    except OSError as exc:
        raise DataSourceError(f"cannot read {filepath}: {exc.strerror or exc}") from exc


def _describe_errors(exc: ValidationError, limit: int = 5) -> str:
    """Compact one-line summary of the first few validation errors."""
    parts = []
    for err in exc.errors()[:limit]:
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    extra = exc.error_count() - limit
    if extra > 0:
        parts.append(f"... and {extra} more")
    return "; ".join(parts)


def load_transactions(path: str | Path | None = None) -> list[Transaction]:
    """Load every transaction record from a JSON file.

    The whole document is validated before anything is returned, so callers
    either get the complete list or a DataSourceError.
    """
    filepath = Path(path) if path is not None else DATA_FILE
    raw = _read_source(filepath)

    try:
        transactions = TransactionList.validate_json(raw)
    except ValidationError as exc:
        raise DataSourceError(f"malformed transaction file {filepath}: {_describe_errors(exc)}") from exc

    check_group_consistency(to_frame(transactions))
    return transactions


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """One row per record, positional index matching the input order."""
    df = pd.DataFrame(
        [t.model_dump() for t in transactions],
        columns=FRAME_COLUMNS,
    )
    return df.astype({
        "transaction_number": "int64",
        "amount": "float64",
        "sender_age": "int64",
        "beneficiary_age": "int64",
        "issue_id": "Int64",
        "issue_solved": "bool",
    })


def check_group_consistency(df: pd.DataFrame) -> None:
    """Reject groups whose members disagree on amount or parties."""
    if df.empty:
        return
    distinct = df.groupby("transaction_number", sort=False)[GROUP_CONSISTENCY_COLUMNS].nunique()
    bad = distinct[(distinct > 1).any(axis=1)]
    if not bad.empty:
        numbers = ", ".join(str(n) for n in bad.index.tolist())
        raise DataSourceError(
            f"inconsistent transaction groups (amount or parties differ): {numbers}"
        )
