from transaction_fetcher.analytics.clients import (
    count_distinct_transactions,
    count_unique_clients,
    transactions_by_beneficiary,
)
from transaction_fetcher.analytics.common import group_by_transaction_number, representatives

from conftest import make_record, make_transactions


def test_count_unique_clients_counts_groups(five_records):
    assert count_unique_clients(make_transactions(five_records)) == 3


def test_count_distinct_transactions_matches_legacy_name(five_records):
    transactions = make_transactions(five_records)
    assert count_distinct_transactions(transactions) == count_unique_clients(transactions)


def test_count_unique_clients_empty():
    assert count_unique_clients([]) == 0


def test_transactions_by_beneficiary_last_write_wins():
    transactions = make_transactions([
        make_record(1, 10, "A", "Grace"),
        make_record(2, 20, "B", "Polly"),
        make_record(3, 30, "C", "Grace"),
    ])
    by_name = transactions_by_beneficiary(transactions)
    assert set(by_name) == {"Grace", "Polly"}
    assert by_name["Grace"] is transactions[2]
    assert by_name["Polly"].transaction_number == 2


def test_group_by_transaction_number(five_records):
    transactions = make_transactions(five_records)
    groups = group_by_transaction_number(transactions)

    assert set(groups) == {10, 20, 30}
    assert groups[10] == [transactions[0], transactions[1]]
    assert groups[20] == [transactions[2]]
    assert [t.issue_id for t in groups[30]] == [3, 2]


def test_group_by_transaction_number_empty():
    assert group_by_transaction_number([]) == {}


def test_representatives_first_of_each_group(five_records):
    transactions = make_transactions(five_records)
    reps = representatives(transactions)
    assert reps == [transactions[0], transactions[2], transactions[3]]
