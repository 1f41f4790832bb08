"""
Structured error types for spine-fp.

The library has exactly two kinds of failure and keeps them apart:

- **Misuse errors** are raised. A caller asked for case analysis without
  supplying every handler; that is a programmer error and no container
  can represent it.
- **Data-level failure** is never raised. It lives inside the containers
  as ``Absent()`` or ``Failure(error)``.

Everything in this module serves the first kind, plus ``describe_error``,
which renders exception payloads of the second kind for diagnostics.

Manifesto:
    - **Typed hierarchy:** All library errors extend SpineFPError
    - **Categorised:** Each error carries an ErrorCategory for routing
    - **Chained:** The underlying exception is kept as ``cause``
    - **Loud misuse:** MissingCaseHandlerError is never swallowed

Architecture:
    ::

        ┌──────────────────────────────────────────────┐
        │                 SpineFPError                  │
        │     (message, category, cause, metadata)      │
        ├──────────────────────────────────────────────┤
        │  MissingCaseHandlerError   (USAGE)            │
        │      family, missing                          │
        └──────────────────────────────────────────────┘

Examples:
    >>> err = MissingCaseHandlerError("Maybe", ("Absent",))
    >>> err.category
    <ErrorCategory.USAGE: 'USAGE'>
    >>> str(err)
    'Maybe.cata requires a callable handler for: Absent'

    >>> describe_error(ValueError("bad input"))
    'ValueError: bad input'

Tags:
    error-handling, exception-hierarchy, misuse, spine-fp

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification in logs.

    Attributes:
        USAGE: The library was called incorrectly (programmer error)
        INTERNAL: Bugs, unexpected state
    """

    USAGE = "USAGE"
    INTERNAL = "INTERNAL"


class SpineFPError(Exception):
    """
    Base exception for all spine-fp errors.

    Carries a category, an optional chained cause and a free-form metadata
    dict that ``to_dict()`` flattens for structured logging. Subclasses set
    ``default_category``.

    Examples:
        >>> error = SpineFPError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = SpineFPError("Bad call").with_context(operation="cata")
        >>> error.metadata["operation"]
        'cata'

    Args:
        message: Human-readable description
        category: Overrides ``default_category``
        cause: Underlying exception, also set as ``__cause__``
        metadata: Extra key-value pairs for logs
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
        metadata: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause
        self.metadata: dict[str, Any] = dict(metadata or {})
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SpineFPError:
        """Add metadata fluently and return self."""
        self.metadata.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        if self.cause is not None:
            result["cause"] = describe_error(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class MissingCaseHandlerError(SpineFPError):
    """
    Raised when ``cata`` is called without a callable handler per variant.

    The check runs before any handler is invoked, on every variant, so a
    call site with a missing handler fails the first time it runs rather
    than only when the unhandled variant finally shows up.

    Attributes:
        family: Container family name ("Maybe" or "Result")
        missing: Handler names that were absent or not callable
    """

    default_category = ErrorCategory.USAGE

    def __init__(self, family: str, missing: tuple[str, ...]):
        self.family = family
        self.missing = tuple(missing)
        super().__init__(
            f"{family}.cata requires a callable handler for: {', '.join(self.missing)}",
            metadata={"family": family, "missing": list(self.missing)},
        )


def describe_error(error: BaseException) -> str:
    """
    Render an exception as ``"<TypeName>: <message>"``.

    Falls back to the bare type name when the exception has no message.

    >>> describe_error(KeyError("name"))
    "KeyError: 'name'"
    >>> describe_error(RuntimeError())
    'RuntimeError'
    """
    message = str(error)
    if not message:
        return type(error).__name__
    return f"{type(error).__name__}: {message}"


__all__ = [
    "ErrorCategory",
    "SpineFPError",
    "MissingCaseHandlerError",
    "describe_error",
]
