"""Shared CLI app objects and output helpers."""

import typer
from rich.console import Console
from rich.text import Text

app = typer.Typer(
    name="preflyt-check",
    help="Pre-deployment security scanner.",
    add_completion=False,
)
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def emit(text: Text) -> None:
    """Print rendered output without adding a second trailing newline."""
    end = "" if text.plain.endswith("\n") else "\n"
    console.print(text, end=end, soft_wrap=True)


def emit_lines(*lines: str) -> None:
    for line in lines:
        console.print(line, markup=False, soft_wrap=True)
