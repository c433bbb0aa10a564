import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from rental_library.config import settings
from rental_library.ledger import InventoryLedger
from rental_library.utils.ui_helpers import set_output_mode, print_inventory, print_stats_result
from rental_library.utils.validators import BookFormValidator, TitleValidator, InvalidAmountError

console = Console()
logger = logging.getLogger(__name__)

MENU_CHOICES = ["1", "2", "3", "4", "5", "6", "0"]


def _configure_logging() -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _ask(label: str) -> str:
    return Prompt.ask(label, default="", show_default=False)


def show_inventory(ledger: InventoryLedger) -> None:
    print_inventory(ledger.list_inventory(), ledger.available_count())


def add(ledger: InventoryLedger) -> None:
    """Ask for the four book fields and add the book if they are valid."""
    title = _ask("📖 Title")
    author = _ask("✍️  Author")
    price_text = _ask("💰 Price")
    rent_cost_text = _ask("🏷️  Rent Cost")

    try:
        form = BookFormValidator.parse_form(title, author, price_text, rent_cost_text)
    except InvalidAmountError as e:
        logger.debug(f"Rejected add-book form: {e}")
        console.print("[bold red]Please enter valid numbers for price and rent cost.[/]")
        return

    if form is None:
        console.print("[yellow]Title, author, price and rent cost are all required. Nothing was added.[/]")
        return

    ledger.add_book(form.title, form.author, form.price, form.rent_cost)
    console.print("[green]Book added![/]")
    show_inventory(ledger)


def delete(ledger: InventoryLedger) -> None:
    title = TitleValidator.clean_title(_ask("🗑️  Enter Book Title to Delete"))
    if not title:
        return
    ledger.delete_book(title)
    console.print("[cyan]Book deleted if it exists and is not rented.[/]")
    show_inventory(ledger)


def rent(ledger: InventoryLedger) -> None:
    title = TitleValidator.clean_title(_ask("📤 Enter Book Title to Rent"))
    if not title:
        return
    if ledger.rent_book(title):
        console.print("[green]Book rented![/]")
    else:
        console.print("[yellow]Book is unavailable or already rented.[/]")
    show_inventory(ledger)


def return_book(ledger: InventoryLedger) -> None:
    title = TitleValidator.clean_title(_ask("📥 Enter Book Title to Return"))
    if not title:
        return
    if ledger.return_book(title):
        console.print("[green]Book returned![/]")
    else:
        console.print("[yellow]Book is not rented or does not exist.[/]")
    show_inventory(ledger)


def stats(ledger: InventoryLedger) -> None:
    print_stats_result(ledger.get_statistics())


def run_menu(ledger: InventoryLedger) -> None:
    """Simple interactive menu for the rental inventory."""
    def render_menu() -> None:
        menu_items = [
            ("1", "Show inventory", "📚"),
            ("2", "Add book", "➕"),
            ("3", "Delete book", "🗑️"),
            ("4", "Rent book", "📤"),
            ("5", "Return book", "📥"),
            ("6", "Show statistics", "📊"),
            ("0", "Exit", "🚪"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        console.print(Panel(
            table,
            title=settings.app_name,
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    actions = {"1": show_inventory, "2": add, "3": delete, "4": rent, "5": return_book, "6": stats}

    while True:
        render_menu()
        try:
            choice = Prompt.ask("Please choose an option", choices=MENU_CHOICES).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            choice = "0"

        if choice == "0":
            console.print("[green]Goodbye![/]")
            break
        try:
            actions[choice](ledger)
        except (EOFError, KeyboardInterrupt):
            console.print("\n[yellow]Cancelled.[/]")
        print()


# --- Typer CLI ---
app = typer.Typer(help="Book rental inventory CLI")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global options; with no command the interactive menu starts."""
    _configure_logging()
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu(InventoryLedger())


@app.command("shell")
def cli_shell():
    """Start the interactive menu with an empty inventory."""
    run_menu(InventoryLedger())


@app.command("version")
def cli_version():
    """Show the application name and version."""
    print(f"{settings.app_name} {settings.app_version}")


if __name__ == "__main__":
    app()
