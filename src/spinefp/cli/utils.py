"""
CLI utility helpers -- output formatting.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def output_json(payload: Any) -> None:
    """Print a JSON document to stdout."""
    console.print_json(json.dumps(payload, default=str))


def fail(message: str, *, code: int = 1) -> None:
    """Print an error line to stderr and exit with ``code``."""
    err_console.print(f"[bold red]Error[/bold red]: {escape(message)}")
    raise typer.Exit(code=code)
