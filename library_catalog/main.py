import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from library_catalog.config import settings
from library_catalog.library import Library, ReturnMismatchError
from library_catalog.ui_helpers import (
    set_output_mode,
    print_books,
    print_users,
    print_transactions,
    print_stats_result,
)

APP_NAME = settings.app_name

console = Console()

SEED_BOOKS = (
    ("Java Programming", "James Gosling", "12345", 3),
    ("Data Structures", "Mark Allen", "67890", 2),
    ("Operating Systems", "Silberschatz", "11223", 4),
)
SEED_USERS = (
    ("Alice", "USER"),
    ("Bob", "ADMIN"),
)


def configure_logging() -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))


def seed_library(lib: Library) -> None:
    """Preload the fixed demo books and users."""
    for title, author, isbn, copies in SEED_BOOKS:
        lib.add_book(title, author, isbn, copies)
    for username, role in SEED_USERS:
        lib.add_user(username, role)


def build_library(seed: bool = True, strict_returns: Optional[bool] = None) -> Library:
    lib = Library(strict_returns=strict_returns)
    if seed:
        seed_library(lib)
    return lib


# --- Typer CLI application ---
app = typer.Typer(help="Library CLI")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    seed: bool = typer.Option(settings.seed_data, "--seed/--no-seed", help="Preload demo books and users"),
    strict_returns: bool = typer.Option(
        settings.strict_returns,
        "--strict-returns/--lenient-returns",
        help="Reject returns that do not match an outstanding borrow of the book",
    ),
):
    """Start the interactive menu when no command is given."""
    configure_logging()
    if output:
        set_output_mode(output)
    ctx.obj = build_library(seed=seed, strict_returns=strict_returns)
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@app.command("books")
def cli_books(ctx: typer.Context):
    """List all books in the catalog."""
    print_books(ctx.obj.list_books())


@app.command("users")
def cli_users(ctx: typer.Context):
    """List all registered users."""
    print_users(ctx.obj.list_users())


@app.command("stats")
def cli_stats(ctx: typer.Context):
    """Show catalog statistics."""
    print_stats_result(ctx.obj.get_statistics())


# --- Interactive menu ---
def prompt_int(label: str) -> Optional[int]:
    """Ask for an integer. Returns None (after printing an error) when the entry is not a number."""
    raw = Prompt.ask(label, console=console).strip()
    try:
        return int(raw)
    except ValueError:
        console.print(f"[red]Invalid number: {escape(raw)}[/]")
        return None


def add_book(lib: Library) -> None:
    title = Prompt.ask("Title", console=console)
    author = Prompt.ask("Author", console=console)
    isbn = Prompt.ask("ISBN", console=console)
    copies = prompt_int("Copies")
    if copies is None:
        return
    book = lib.add_book(title, author, isbn, copies)
    console.print(f"[green]Added:[/] {escape(str(book))}")


def list_books(lib: Library) -> None:
    print_books(lib.list_books())


def search_books(lib: Library) -> None:
    keyword = Prompt.ask("Enter keyword", console=console, default="", show_default=False)
    print_books(lib.search_books(keyword), empty_message="No books found.")


def borrow_book(lib: Library) -> None:
    user_id = prompt_int("Enter user ID")
    if user_id is None:
        return
    book_id = prompt_int("Enter book ID to borrow")
    if book_id is None:
        return
    if lib.borrow_book(user_id, book_id):
        console.print("[green]Book borrowed successfully.[/]")
    else:
        console.print("[red]Borrow failed (invalid user/book or no copies).[/]")


def return_book(lib: Library) -> None:
    book_id = prompt_int("Enter book ID to return")
    if book_id is None:
        return
    tx_id = prompt_int("Enter transaction ID")
    if tx_id is None:
        return
    try:
        returned = lib.return_book(book_id, tx_id)
    except ReturnMismatchError as e:
        console.print(f"[red]Invalid return: {escape(str(e))}[/]")
        return
    if returned:
        console.print("[green]Book returned successfully.[/]")
    else:
        console.print("[red]Invalid return.[/]")


def add_user(lib: Library) -> None:
    username = Prompt.ask("Username", console=console)
    role = Prompt.ask("Role (ADMIN/USER)", console=console)
    user = lib.add_user(username, role)
    console.print(f"[green]Added:[/] {escape(str(user))}")


def list_users(lib: Library) -> None:
    print_users(lib.list_users())


def list_transactions(lib: Library) -> None:
    print_transactions(lib.list_transactions())


MENU_ACTIONS = {
    1: add_book,
    2: list_books,
    3: search_books,
    4: borrow_book,
    5: return_book,
    6: add_user,
    7: list_users,
    8: list_transactions,
}


def render_menu() -> None:
    menu_items = [
        ("1", "Add Book", "➕"),
        ("2", "List Books", "📚"),
        ("3", "Search Books", "🔎"),
        ("4", "Borrow Book", "📤"),
        ("5", "Return Book", "📥"),
        ("6", "Add User", "👤"),
        ("7", "List Users", "👥"),
        ("8", "List Transactions", "🔁"),
        ("0", "Exit", "🚪"),
    ]

    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in menu_items:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(1, 2)))


def run_menu(lib: Library) -> None:
    """Simple interactive menu over a Library instance."""
    while True:
        render_menu()
        try:
            raw = Prompt.ask("Choose an option", console=console).strip()
            try:
                choice = int(raw)
            except ValueError:
                choice = None

            if choice == 0:
                console.print("[green]Goodbye![/]")
                break
            action = MENU_ACTIONS.get(choice)
            if action is None:
                console.print("[yellow]Invalid choice![/]")
                continue
            action(lib)
        except EOFError:
            # End of input closes the menu like option 0
            console.print("[green]Goodbye![/]")
            break
        console.print()


if __name__ == "__main__":
    app()
