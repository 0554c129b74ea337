"""Terminal output using rich library"""

from rich.console import Console
from rich.markup import escape

from .constants import BANNER
from .parsing import format_date

console = Console(highlight=False, soft_wrap=True)


def print_header(title: str = BANNER) -> None:
    """Print the calculator banner"""
    console.print(title, style="bold cyan", markup=False)


def print_error(message: str, prefix: str = "Error") -> None:
    """Print error message"""
    console.print(f"[bold red]{prefix}:[/bold red] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(message, style="dim", markup=False)


def print_result(day: int, month: int, year: int, name: str) -> None:
    """Print the result block for a computed weekday"""
    console.print()
    console.print("--- Result ---", style="bold cyan")
    console.print(f"Date entered: {format_date(day, month, year)}")
    console.print(f"The day of the week was: [bold green]{name}[/bold green]")
    console.print("----------------", style="bold cyan")
