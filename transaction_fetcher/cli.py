#!/usr/bin/env python3
"""
Transaction Fetcher CLI — print query results for a transaction file.

USAGE:
  python -m transaction_fetcher.cli demo                            # Every query once
  python -m transaction_fetcher.cli demo --file data.json           # Custom input file
  python -m transaction_fetcher.cli demo --sender "Arthur Shelby"   # Demo sender/client names
  python -m transaction_fetcher.cli demo --json                     # Machine-readable output

  python -m transaction_fetcher.cli query total                     # Single query
  python -m transaction_fetcher.cli query sent-by "Tom Shelby"
  python -m transaction_fetcher.cli query open-issues "Grace Burgess" --json
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable

from transaction_fetcher.analytics.common import sanitize_for_json
from transaction_fetcher.config import DATA_FILE, DEMO_CLIENT, DEMO_SENDER
from transaction_fetcher.data.schemas import Transaction
from transaction_fetcher.errors import DataSourceError, TransactionFetcherError
from transaction_fetcher.fetcher import TransactionDataFetcher


# ---------------------------------------------------------------------------
# Query table: name -> (label, needs a name argument, call)
# ---------------------------------------------------------------------------

QUERIES: dict[str, tuple[str, bool, Callable[..., Any]]] = {
    "total": ("TOTAL TRANSACTION AMOUNT", False,
              lambda f: f.get_total_transaction_amount()),
    "sent-by": ("TOTAL TRANSACTION AMOUNT SENT BY", True,
                lambda f, name: f.get_total_transaction_amount_sent_by(name)),
    "max": ("MAX TRANSACTION AMOUNT", False,
            lambda f: f.get_max_transaction_amount()),
    "unique-clients": ("UNIQUE CLIENTS", False,
                       lambda f: f.count_unique_clients()),
    "open-issues": ("HAS OPEN ISSUES", True,
                    lambda f, name: f.has_open_compliance_issues(name)),
    "by-beneficiary": ("TRANSACTIONS BY BENEFICIARY NAME", False,
                       lambda f: f.get_transactions_by_beneficiary_name()),
    "unsolved-ids": ("UNSOLVED IDS", False,
                     lambda f: f.get_unsolved_issue_ids()),
    "solved-messages": ("SOLVED ISSUE MESSAGES", False,
                        lambda f: f.get_all_solved_issue_messages()),
    "top3": ("TOP 3 TRANSACTIONS", False,
             lambda f: f.get_top3_transactions_by_amount()),
    "top-sender": ("TOP SENDER", False,
                   lambda f: f.get_top_sender()),
    "groups": ("TRANSACTIONS BY NUMBER", False,
               lambda f: f.group_by_transaction_number()),
}

# Order and arguments used by the demo command
DEMO_ORDER = [
    "total", "sent-by", "max", "unique-clients", "open-issues",
    "by-beneficiary", "unsolved-ids", "solved-messages", "top3", "top-sender",
]


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _format_transaction(t: Transaction) -> str:
    line = f"#{t.transaction_number} {t.sender_full_name} -> {t.beneficiary_full_name} {t.amount:,.2f}"
    if t.issue_id is not None:
        state = "solved" if t.issue_solved else "open"
        line += f" [issue {t.issue_id} {state}]"
    return line


def format_value(value: Any) -> str:
    """Human-readable rendering of a query result."""
    if value is None:
        return "(none)"
    if isinstance(value, Transaction):
        return _format_transaction(value)
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, (set, frozenset)):
        return "{" + ", ".join(str(v) for v in sorted(value)) + "}"
    if isinstance(value, dict):
        lines = [f"\n    {k}: {format_value(v)}" for k, v in value.items()]
        return "".join(lines) if lines else "{}"
    if isinstance(value, list):
        if value and isinstance(value[0], Transaction):
            return "".join(f"\n    {format_value(v)}" for v in value)
        return "[" + ", ".join(repr(v) for v in value) + "]"
    return str(value)


def _write_json(data) -> None:
    json.dump(sanitize_for_json(data), sys.stdout, indent=2)
    sys.stdout.write("\n")


def _run(fetcher: TransactionDataFetcher, name: str, arg: str | None):
    _, needs_arg, call = QUERIES[name]
    return call(fetcher, arg) if needs_arg else call(fetcher)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_demo(args) -> int:
    """Print every query once; query errors are reported and skipped."""
    fetcher = TransactionDataFetcher(args.file, reuse=args.reuse, verbose=not args.json)
    demo_args = {"sent-by": args.sender, "open-issues": args.client}

    if not args.json:
        print("\n" + "=" * 70)
        print("  TRANSACTION FETCHER — QUERY DEMO")
        print(f"  Source: {fetcher.source}")
        print("=" * 70)

    results: dict[str, Any] = {}
    for i, name in enumerate(DEMO_ORDER):
        label = QUERIES[name][0]
        if i == 1:
            # announce the source once, not on every reload
            fetcher.verbose = False
        try:
            value = _run(fetcher, name, demo_args.get(name))
        except DataSourceError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        except TransactionFetcherError as exc:
            results[name] = {"error": str(exc)}
            if not args.json:
                print(f"{label} : error: {exc}")
            continue

        results[name] = value
        if not args.json:
            print(f"{label} : {format_value(value)}")

    if args.json:
        _write_json(results)
    return 0


def cmd_query(args) -> int:
    """Run a single named query."""
    label, needs_arg, _ = QUERIES[args.name]
    if needs_arg and args.arg is None:
        print(f"Error: query '{args.name}' needs a name argument", file=sys.stderr)
        return 2

    fetcher = TransactionDataFetcher(args.file, verbose=False)
    try:
        value = _run(fetcher, args.name, args.arg)
    except TransactionFetcherError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        _write_json(value)
    else:
        print(f"{label} : {format_value(value)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Transaction Fetcher — analytical queries over a transaction file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=None, help=f"Transaction JSON file (default: {DATA_FILE})")
    common.add_argument("--json", action="store_true", help="Print results as JSON")

    # demo subcommand
    demo_parser = subparsers.add_parser("demo", parents=[common], help="Print every query result once")
    demo_parser.add_argument("--sender", default=DEMO_SENDER, help=f"Sender for the sent-by query (default: {DEMO_SENDER})")
    demo_parser.add_argument("--client", default=DEMO_CLIENT, help=f"Client for the open-issues query (default: {DEMO_CLIENT})")
    demo_parser.add_argument("--reuse", action="store_true", help="Load the file once instead of once per query")
    demo_parser.set_defaults(func=cmd_demo)

    # query subcommand
    query_parser = subparsers.add_parser("query", parents=[common], help="Run one query")
    query_parser.add_argument("name", choices=sorted(QUERIES), help="Query name")
    query_parser.add_argument("arg", nargs="?", help="Sender or client name, for queries that take one")
    query_parser.set_defaults(func=cmd_query)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
