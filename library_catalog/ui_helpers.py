import os
import json
from typing import Any, Dict, List, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from library_catalog.config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

BOOK_COLUMNS = (("ID", "id"), ("Title", "title"), ("Author", "author"), ("ISBN", "isbn"), ("Copies", "copies"))
USER_COLUMNS = (("ID", "id"), ("Username", "username"), ("Role", "role"))
TRANSACTION_COLUMNS = (
    ("TxID", "id"),
    ("User", "user_id"),
    ("Book", "book_id"),
    ("Borrowed", "borrow_date"),
    ("Returned", "return_date"),
)


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored; the current mode stays


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_records(records: Sequence[Any], empty_message: str, title: str,
                  columns: Tuple[Tuple[str, str], ...]) -> None:
    """Print records in the current output mode.
    - plain: one ``str(record)`` line per record, or ``empty_message``
    - json: JSON array of ``record.to_dict()``
    - rich: Rich table with the given (header, key) columns
    """
    mode = get_output_mode()

    if not records:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([r.to_dict() for r in records], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, show_lines=True, header_style="bold cyan")
        for header, _ in columns:
            table.add_column(header, style="white")
        for r in records:
            data = r.to_dict()
            table.add_row(*[_cell(data.get(key)) for _, key in columns])
        _console.print(table)
    else:
        for r in records:
            print(r)


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)


def print_books(books: List[Any], empty_message: str = "No books available.") -> None:
    print_records(books, empty_message, "📚 Books", BOOK_COLUMNS)


def print_users(users: List[Any]) -> None:
    print_records(users, "No users registered.", "👤 Users", USER_COLUMNS)


def print_transactions(transactions: List[Any]) -> None:
    print_records(transactions, "No transactions yet.", "🔁 Transactions", TRANSACTION_COLUMNS)


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    labels = {
        "total_titles": "Total Titles",
        "available_copies": "Available Copies",
        "unique_authors": "Unique Authors",
        "total_users": "Total Users",
        "total_transactions": "Total Transactions",
        "outstanding_transactions": "Outstanding Transactions",
    }

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{labels.get(k, k)}:[/] {v}" for k, v in stats.items())
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for key, value in stats.items():
            print(f"{labels.get(key, key)}: {value}")
