"""
Transaction Fetcher — Configuration: data file, demo defaults, constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Data source — override with TRANSACTIONS_FILE env var
# ---------------------------------------------------------------------------
# Relative paths resolve against the working directory at load time
DATA_FILE = Path(os.environ.get("TRANSACTIONS_FILE", "transactions.json"))

# ---------------------------------------------------------------------------
# Frame columns (Python field names, source order)
# ---------------------------------------------------------------------------
FRAME_COLUMNS = [
    "transaction_number",
    "amount",
    "sender_full_name",
    "sender_age",
    "beneficiary_full_name",
    "beneficiary_age",
    "issue_id",
    "issue_solved",
    "issue_message",
]

# Fields that must agree across every record of one transaction group
GROUP_CONSISTENCY_COLUMNS = [
    "amount",
    "sender_full_name",
    "sender_age",
    "beneficiary_full_name",
    "beneficiary_age",
]

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
TOP_N = 3

# Names used by the demo command when none are given
DEMO_SENDER = "Tom Shelby"
DEMO_CLIENT = "Grace Burgess"
