"""
Adapters from conventional fallible calls to containers.

These are the bridge between exception-based code and container-based
code. Each adapter runs the wrapped call exactly once, synchronously, and
is the single place where that call's exceptions are caught.

Manifesto:
    - **Bridge pattern:** Convert the exception world to the container world
    - **One boundary:** Errors from the wrapped call are caught here and only here
    - **Zero-argument:** Wrapped functions take no arguments (use a lambda)
    - **Misuse stays loud:** MissingCaseHandlerError is re-raised, never wrapped

Architecture:
    ::

        ┌─────────────┐   encase      ┌──────────────┐
        │ f() returns │ ────────────> │ Present(val) │
        │ f() raises  │ ────────────> │ Absent()     │
        └─────────────┘               └──────────────┘

        ┌─────────────┐   encase_res  ┌──────────────┐
        │ f() returns │ ────────────> │ Success(val) │
        │ f() raises  │ ────────────> │ Failure(exc) │
        └─────────────┘               └──────────────┘

        parse_date("2019-02-13T21:04:10.984Z") ──> Present(datetime(..., UTC))
        parse_date("2019-02-13T21:04:1")       ──> Absent()

Examples:
    >>> import json
    >>> encase(lambda: json.loads('{"a": 1}'))
    Present({'a': 1})
    >>> encase(lambda: json.loads('<>'))
    Absent()
    >>> encase_res(lambda: 1 / 0)
    Failure(ZeroDivisionError('division by zero'))

Guardrails:
    ❌ DON'T: Pass functions with arguments directly
    ✅ DO: Wrap in lambda: encase(lambda: fetch(url))

    ❌ DON'T: Expect side effects to be undone when f raises
    ✅ DO: Keep wrapped calls free of partial writes, or handle them yourself

Tags:
    adapters, exception-bridge, try-catch, parsing, spine-fp

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from spinefp.core.errors import MissingCaseHandlerError
from spinefp.core.logging import get_logger
from spinefp.core.maybe import Absent, Maybe, Present
from spinefp.core.result import Failure, Result, Success
from spinefp.core.timestamps import TIMESTAMP_PATTERN, build_utc_datetime

T = TypeVar("T")

logger = get_logger(__name__)


def encase(f: Callable[[], T]) -> Maybe[T]:
    """
    Call f and wrap the outcome in a Maybe.

    Returns Present with f's return value (even when that value is None:
    the call succeeded) or Absent if f raised. The exception is discarded.

    Args:
        f: Zero-argument callable that may raise

    Returns:
        Present(f()) on return, Absent() on an Exception
    """
    try:
        return Present(f())
    except MissingCaseHandlerError:
        raise
    except Exception as e:
        logger.debug("encase_caught", error_type=type(e).__name__)
        return Absent()


def encase_res(f: Callable[[], T]) -> Result[T, Exception]:
    """
    Call f and wrap the outcome in a Result.

    Unlike ``encase`` the exception is kept: the Failure payload is the
    exception object itself, so callers can branch on its type and read its
    message.

    >>> import json
    >>> encase_res(lambda: json.loads('<>')).describe()
    'Failure(JSONDecodeError: Expecting value: line 1 column 1 (char 0))'
    """
    try:
        return Success(f())
    except MissingCaseHandlerError:
        raise
    except Exception as e:
        logger.debug("encase_res_caught", error_type=type(e).__name__)
        return Failure(e)


def parse_date(value: object) -> Maybe[datetime]:
    """
    Parse a strict ISO 8601 timestamp.

    Accepts exactly ``YYYY-MM-DDTHH:MM:SS.fff`` followed by ``Z`` or a
    ``±HH:MM`` offset. Missing components, other separators, truncated
    strings, non-strings and calendar-invalid instants are all Absent; there
    is no best-effort partial parse.

    The parsed datetime is aware and in UTC, so ``to_iso8601`` of it gives
    back the canonical input.

    >>> parse_date("2019-02-13T21:04:10.984Z").map(lambda d: d.isoformat())
    Present('2019-02-13T21:04:10.984000+00:00')
    >>> parse_date("2019-02-13T21:04:1")
    Absent()
    """
    if value is None:
        return Absent()
    if not isinstance(value, str):
        logger.debug("parse_date_rejected", reason="not_a_string", input_type=type(value).__name__)
        return Absent()

    match = TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        logger.debug("parse_date_rejected", reason="grammar", value=value)
        return Absent()

    parsed = encase(lambda: build_utc_datetime(match))
    if parsed.is_absent():
        logger.debug("parse_date_rejected", reason="calendar", value=value)
    return parsed


__all__ = ["encase", "encase_res", "parse_date"]
