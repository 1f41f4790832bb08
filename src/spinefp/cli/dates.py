"""
CLI: ``spine-fp dates`` -- strict timestamp parsing.
"""

from __future__ import annotations

import typer

from spinefp.cli.utils import fail, output_json
from spinefp.core.adapters import parse_date
from spinefp.core.timestamps import to_iso8601

app = typer.Typer(no_args_is_help=True)


@app.command("parse")
def parse(
    value: str = typer.Argument(..., help="Timestamp, e.g. 2019-02-13T21:04:10.984Z"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Parse VALUE and print it in canonical UTC form."""
    rendered = parse_date(value).cata(Present=to_iso8601, Absent=lambda: None)

    if json_out:
        output_json({"input": value, "present": rendered is not None, "value": rendered})
        if rendered is None:
            raise typer.Exit(code=1)
        return

    if rendered is None:
        fail(f"not a strict ISO 8601 timestamp: {value}")
    typer.echo(rendered)
