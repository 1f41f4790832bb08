"""
Root Typer application for the spine-fp CLI.

A small diagnostic surface over the adapters: parse a timestamp the way
``parse_date`` does, decode JSON the way ``encase_res`` sees it.
"""

from __future__ import annotations

import typer
from typer import Typer

from spinefp.core.logging import configure_logging
from spinefp.core.settings import get_settings

app = Typer(
    name="spine-fp",
    help="spine-fp -- optional and result containers, from the command line.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("spine-fp")
        except PackageNotFoundError:
            from spinefp import __version__ as v
        typer.echo(f"spine-fp {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override SPINE_FP_LOG_LEVEL for this invocation.",
    ),
) -> None:
    """spine-fp CLI -- parse timestamps and JSON into containers."""
    settings = get_settings()
    try:
        configure_logging(
            level=log_level or settings.log_level,
            json_format=settings.json_logs,
            service=settings.service_name,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


# ── Sub-command registration ─────────────────────────────────────────────

from spinefp.cli.dates import app as dates_app  # noqa: E402
from spinefp.cli.decode import app as decode_app  # noqa: E402

app.add_typer(dates_app, name="dates", help="Strict timestamp parsing.")
app.add_typer(decode_app, name="json", help="JSON decoding into a Result.")


if __name__ == "__main__":
    app()
