import json

import pytest

from transaction_fetcher.data.schemas import Transaction


def make_record(mtn, amount, sender="A", beneficiary="B", *, issue_id=None, solved=True, message=None, **overrides):
    record = {
        "mtn": mtn,
        "amount": amount,
        "senderFullName": sender,
        "senderAge": 30,
        "beneficiaryFullName": beneficiary,
        "beneficiaryAge": 40,
        "issueId": issue_id,
        "issueSolved": solved,
        "issueMessage": message,
    }
    record.update(overrides)
    return record


def make_transactions(records):
    return [Transaction.model_validate(r) for r in records]


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="transactions.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def five_records():
    """Five rows across three transfers; transfers 10 and 30 carry two issues each."""
    return [
        make_record(10, 200, "Tom", "Grace", issue_id=1, solved=True, message="cleared"),
        make_record(10, 200, "Tom", "Grace", issue_id=2, solved=False, message="pending review"),
        make_record(20, 75.5, "Arthur", "Polly", issue_id=None, solved=True, message=None),
        make_record(30, 120, "Tom", "Michael", issue_id=3, solved=True, message="documents received"),
        make_record(30, 120, "Tom", "Michael", issue_id=2, solved=False, message=None),
    ]
