"""
Result envelope for explicit success/failure handling.

A ``Result[T, E]`` is either ``Success(value)`` or ``Failure(error)``. It
makes the outcome of a fallible computation a value: failures flow through
``map``/``chain`` untouched, and the caller decides what to do with them at
the end, through ``cata``.

Only the success channel is transformable. There is deliberately no
operation that maps the failure channel; to change an error, case-analyse
and build a new Failure.

Manifesto:
    - **Explicit over implicit:** No hidden exceptions that callers might miss
    - **Short-circuit propagation:** A Failure skips every map/chain step
    - **Error as a value:** The failure payload is kept as-is, usually the
      exception object itself, so its type and message survive
    - **Separate from Maybe:** A Failure is never reinterpreted as Absent

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────┐
        │                     Result[T, E]                         │
        │    map · chain · ap · default · cata · describe          │
        │    is_success · is_failure                               │
        ├───────────────────────────┬─────────────────────────────┤
        │      Success[T]           │       Failure[E]             │
        │      value: T             │       error: E               │
        └───────────────────────────┴─────────────────────────────┘

Examples:
    >>> Success(10).map(lambda x: x * 2).map(lambda x: x + 1)
    Success(21)
    >>> Failure(ValueError("oops")).map(lambda x: x * 2)
    Failure(ValueError('oops'))
    >>> Failure(ValueError("oops")).cata(Success=str, Failure=lambda e: f"failed: {e}")
    'failed: oops'

    Chaining fallible steps:

    >>> def positive(x: int) -> Result[int, ValueError]:
    ...     return Success(x) if x > 0 else Failure(ValueError("Must be positive"))
    >>> Success(5).chain(positive)
    Success(5)
    >>> Success(-1).chain(positive).is_failure()
    True

Guardrails:
    ❌ DON'T: Raise inside map/chain to signal an expected failure
    ✅ DO: Return Failure from the chain function

    ❌ DON'T: Stringify the error before wrapping it
    ✅ DO: Keep the exception as the payload; describe() renders it

Tags:
    result-pattern, error-handling, functional-programming, monadic, spine-fp

Doc-Types:
    - API Reference
    - Result Pattern Guide
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, assert_never

from spinefp.core._cases import require_handlers
from spinefp.core.errors import describe_error

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")

_CASES = ("Success", "Failure")


class Result(Generic[T, E]):
    """
    Base of the success-or-failure family.

    Not instantiable and closed to subclasses outside this module. Each
    operation matches exhaustively on Success and Failure.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is Result:
            raise TypeError("Result cannot be instantiated; use Success(value) or Failure(error)")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Result is a closed family; {cls.__qualname__} cannot extend it")

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the value if Success."""
        match self:
            case Success(value):
                return Success(f(value))
            case Failure():
                return self
        assert_never(self)

    def chain(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain to another Result-returning function."""
        match self:
            case Success(value):
                return f(value)
            case Failure():
                return self
        assert_never(self)

    def ap(self, other: Result[Any, E]) -> Result[Any, E]:
        """``Success(fn).ap(other)`` is ``other.map(fn)``; a Failure returns itself."""
        match self:
            case Success(fn):
                return other.map(fn)
            case Failure():
                return self
        assert_never(self)

    def default(self, thunk: Callable[[], T]) -> Result[T, E]:
        """Replace a Failure with ``Success(thunk())``. Success is returned as-is."""
        match self:
            case Success():
                return self
            case Failure():
                return Success(thunk())
        assert_never(self)

    def cata(
        self,
        cases: Mapping[str, Callable[..., R]] | None = None,
        /,
        **handlers: Callable[..., R],
    ) -> R:
        """
        Exhaustive case analysis.

        ``Success`` receives the value, ``Failure`` receives the error. Both
        handlers must be callable or MissingCaseHandlerError is raised.
        """
        on = require_handlers("Result", _CASES, cases, handlers)
        match self:
            case Success(value):
                return on["Success"](value)
            case Failure(error):
                return on["Failure"](error)
        assert_never(self)

    def describe(self) -> str:
        """Debug rendering. Exception payloads render as ``Type: message``."""
        match self:
            case Success(value):
                return f"Success({value})"
            case Failure(error):
                if isinstance(error, BaseException):
                    return f"Failure({describe_error(error)})"
                return f"Failure({error})"
        assert_never(self)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Success(Result[T, Any]):
    """Successful outcome holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[Any, E]):
    """
    Failed outcome holding an error.

    The payload is unconstrained, but by convention it is the exception that
    caused the failure, so callers can branch on its type.
    """

    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


__all__ = ["Result", "Success", "Failure"]
