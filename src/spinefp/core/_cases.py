"""Handler resolution shared by ``Maybe.cata`` and ``Result.cata``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from spinefp.core.errors import MissingCaseHandlerError


def require_handlers(
    family: str,
    names: tuple[str, ...],
    cases: Mapping[str, Any] | None,
    handlers: Mapping[str, Any],
) -> dict[str, Callable[..., Any]]:
    """Merge positional and keyword handlers and check every variant is covered.

    Keyword handlers win over entries of the same name in ``cases``.
    Raises MissingCaseHandlerError listing every name that is absent or
    bound to something that is not callable.
    """
    merged: dict[str, Any] = dict(cases or {})
    merged.update(handlers)
    missing = tuple(name for name in names if not callable(merged.get(name)))
    if missing:
        raise MissingCaseHandlerError(family, missing)
    return {name: merged[name] for name in names}
