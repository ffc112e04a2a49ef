"""Read-only queries over loaded transaction records."""
from .common import group_by_transaction_number, representatives
from .amounts import total_amount, total_amount_sent_by, max_amount, top_by_amount, top3_by_amount, top_sender
from .clients import count_unique_clients, count_distinct_transactions, transactions_by_beneficiary
from .compliance import has_open_compliance_issues, unsolved_issue_ids, all_solved_issue_messages
