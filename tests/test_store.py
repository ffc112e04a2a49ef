import pytest

from transaction_fetcher.data.store import TransactionStore
from transaction_fetcher.errors import DataSourceError


def test_store_load_counts_records_and_groups(write_json, five_records):
    store = TransactionStore(write_json(five_records), verbose=False)
    assert not store.is_loaded
    assert store.group_count() == 0

    store.load()

    assert store.is_loaded
    assert len(store.transactions) == 5
    assert store.group_count() == 3


def test_store_failed_load_keeps_previous_records(write_json, five_records):
    path = write_json(five_records)
    store = TransactionStore(path, verbose=False).load()

    path.write_text("[1, 2", encoding="utf-8")
    with pytest.raises(DataSourceError):
        store.load()
    assert len(store.transactions) == 5
