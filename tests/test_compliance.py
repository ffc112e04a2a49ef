import pytest

from transaction_fetcher.analytics.compliance import (
    all_solved_issue_messages,
    has_open_compliance_issues,
    unsolved_issue_ids,
)

from conftest import make_record, make_transactions


@pytest.mark.parametrize(
    "client,expected",
    [
        ("Tom", True),        # sender with open issues
        ("Grace", True),      # beneficiary of an open issue
        ("Arthur", False),    # only solved records
        ("Polly", False),
        ("Nobody", False),
    ],
)
def test_has_open_compliance_issues(five_records, client, expected):
    assert has_open_compliance_issues(make_transactions(five_records), client) is expected


def test_has_open_compliance_issues_empty():
    assert has_open_compliance_issues([], "Tom") is False


def test_unsolved_issue_ids_are_distinct(five_records):
    # issue 2 is open on two different records
    assert unsolved_issue_ids(make_transactions(five_records)) == {2}


def test_unsolved_issue_ids_skip_null_ids():
    transactions = make_transactions([
        make_record(1, 10, issue_id=None, solved=False),
        make_record(2, 10, issue_id=7, solved=False),
        make_record(3, 10, issue_id=8, solved=True),
    ])
    assert unsolved_issue_ids(transactions) == {7}


def test_unsolved_issue_ids_example_from_three_rows():
    transactions = make_transactions([
        make_record(1, 100, "A", issue_id=1, solved=True),
        make_record(1, 100, "A", issue_id=2, solved=False),
        make_record(2, 50, "B", issue_id=3, solved=True, message="ok"),
    ])
    assert len(unsolved_issue_ids(transactions)) == 1
    assert all_solved_issue_messages(transactions) == ["ok"]


def test_all_solved_issue_messages_in_source_order(five_records):
    messages = all_solved_issue_messages(make_transactions(five_records))
    assert messages == ["cleared", "documents received"]


def test_all_solved_issue_messages_empty():
    assert all_solved_issue_messages([]) == []
