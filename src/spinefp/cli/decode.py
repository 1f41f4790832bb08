"""
CLI: ``spine-fp json`` -- JSON decoding through ``encase_res``.
"""

from __future__ import annotations

import json

import typer

from spinefp.cli.utils import fail, output_json
from spinefp.core.adapters import encase_res
from spinefp.core.errors import describe_error

app = typer.Typer(no_args_is_help=True)


def _report(error: Exception) -> None:
    fail(describe_error(error))


@app.command("parse")
def parse(
    text: str = typer.Argument(..., help="JSON document to decode"),
    describe: bool = typer.Option(False, "--describe", help="Print the container instead of the value."),
) -> None:
    """Decode TEXT; print the value, or the parser's diagnostic on failure."""
    result = encase_res(lambda: json.loads(text))

    if describe:
        typer.echo(result.describe())
        if result.is_failure():
            raise typer.Exit(code=1)
        return

    result.cata(Success=output_json, Failure=_report)
