"""
Transaction record schema, validated strictly at load time.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Integer fields land in int64 frame columns
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Transaction(BaseModel):
    """One reported transaction row.

    Rows sharing a ``transaction_number`` describe the same transfer, once per
    compliance issue: amount, names and ages match across the group and only
    the issue fields differ.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
    )

    transaction_number: int = Field(alias="mtn", ge=INT64_MIN, le=INT64_MAX)
    amount: float = Field(ge=0, allow_inf_nan=False)
    sender_full_name: str = Field(alias="senderFullName")
    sender_age: int = Field(alias="senderAge", ge=INT64_MIN, le=INT64_MAX)
    beneficiary_full_name: str = Field(alias="beneficiaryFullName")
    beneficiary_age: int = Field(alias="beneficiaryAge", ge=INT64_MIN, le=INT64_MAX)
    issue_id: Optional[int] = Field(default=None, alias="issueId", ge=INT64_MIN, le=INT64_MAX)
    issue_solved: bool = Field(alias="issueSolved")
    issue_message: Optional[str] = Field(default=None, alias="issueMessage")


# Top-level document: a JSON array of transaction objects
TransactionList = TypeAdapter(list[Transaction])
