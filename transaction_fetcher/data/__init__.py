"""Data loading, validation, and in-memory store."""
from .loader import load_transactions, to_frame, check_group_consistency
from .store import TransactionStore
from .schemas import Transaction
