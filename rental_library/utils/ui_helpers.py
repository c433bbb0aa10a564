import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from rental_library.book import Book
from rental_library.config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # unknown values are ignored; the current mode stays

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.default_output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def format_book_line(book: Book) -> str:
    sym = settings.currency_symbol
    return (f"{book.title:<{settings.title_column_width}} {book.author:<{settings.author_column_width}} "
            f"Price: {sym}{book.price:.2f} Rent: {sym}{book.rent_cost:.2f} Status: {book.status}")

def format_inventory(books: List[Book], available_count: int) -> str:
    """Text view of the stock: header, one line per book, then the available tally."""
    lines = ["Inventory:"]
    lines.extend(format_book_line(b) for b in books)
    lines.append("")
    lines.append(f"Total Books Available: {available_count}")
    return "\n".join(lines)

def print_inventory(books: List[Book], available_count: int) -> None:
    """Print the inventory according to the current output mode.
    - plain: the fixed-width text view
    - json: {"books": [...], "available_count": n}
    - rich: a Rich table followed by the tally
    """
    mode = get_output_mode()

    if mode == "json":
        payload = {"books": [b.to_dict() for b in books], "available_count": available_count}
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        sym = settings.currency_symbol
        table = Table(title="📚 Inventory", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Price", justify="right")
        table.add_column("Rent", justify="right")
        table.add_column("Status")
        for b in books:
            status = "[red]Rented[/]" if b.is_rented else "[green]Available[/]"
            table.add_row(escape(b.title), escape(b.author), f"{sym}{b.price:.2f}", f"{sym}{b.rent_cost:.2f}", status)
        _console.print(table)
        _console.print(f"[bold]Total Books Available:[/] {available_count}")
    else:
        print(format_inventory(books, available_count))

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print ledger statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Available (tally):[/] {stats.get('available_count', 0)}\n"
            f"[bold]Unrented:[/] {stats.get('unrented_books', 0)}\n"
            f"[bold]Rented:[/] {stats.get('rented_books', 0)}\n"
            f"[bold]Unique Authors:[/] {stats.get('unique_authors', 0)}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Total Books Available: {stats.get('available_count', 0)}")
        print(f"Unrented Books: {stats.get('unrented_books', 0)}")
        print(f"Rented Books: {stats.get('rented_books', 0)}")
        print(f"Unique Authors: {stats.get('unique_authors', 0)}")
