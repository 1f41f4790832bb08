"""
Optional values as a closed two-variant family.

A ``Maybe[T]`` is either ``Present(value)`` or ``Absent()``. It replaces
"returns None sometimes" with a value the caller cannot forget to check:
the only sanctioned way to get the payload out is ``cata``, which demands
a handler for both variants.

Manifesto:
    - **Closed family:** Present and Absent are the only variants
    - **Immutable:** Frozen, slotted dataclasses; never mutated after creation
    - **Structural equality:** ``Absent() == Absent()``, no singleton needed
    - **Exhaustive extraction:** cata fails loudly on a missing handler
    - **Payload is opaque:** Present(None), Present(Present(1)) are all fine

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────┐
        │                       Maybe[T]                           │
        │    map · chain · ap · default · cata · describe          │
        │    is_present · is_absent                                │
        ├───────────────────────────┬─────────────────────────────┤
        │      Present[T]           │         Absent               │
        │      value: T             │         (no payload)         │
        └───────────────────────────┴─────────────────────────────┘

        to_optional(x):   None ──> Absent()
                          x    ──> Present(x)

Examples:
    >>> to_optional(5).map(lambda x: x + 1)
    Present(6)
    >>> to_optional(None).map(lambda x: x + 1)
    Absent()
    >>> Present("abc").cata(Present=str.upper, Absent=lambda: "")
    'ABC'
    >>> Absent().default(lambda: 42)
    Present(42)
    >>> Present(str.upper).ap(Present("hi"))
    Present('HI')

Guardrails:
    ❌ DON'T: Reach into ``.value`` after an ``is_present()`` check
    ✅ DO: Use cata (or a match statement) to handle both variants

    ❌ DON'T: Use describe() output for equality or branching
    ✅ DO: Compare containers directly, they have structural equality

Tags:
    maybe, optional, functional-programming, immutable, spine-fp

Doc-Types:
    - API Reference
    - Design Patterns Guide
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, assert_never

from spinefp.core._cases import require_handlers

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_CASES = ("Present", "Absent")


class Maybe(Generic[T]):
    """
    Base of the optional-value family.

    Not instantiable and closed to subclasses outside this module. Every
    operation is defined once here and matches exhaustively on the two
    variants, so adding a variant means touching every operation.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is Maybe:
            raise TypeError("Maybe cannot be instantiated; use Present(value) or Absent()")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Maybe is a closed family; {cls.__qualname__} cannot extend it")

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Apply f to the payload if Present."""
        match self:
            case Present(value):
                return Present(f(value))
            case Absent():
                return Absent()
        assert_never(self)

    def chain(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Return f(payload) if Present. f must return a Maybe."""
        match self:
            case Present(value):
                return f(value)
            case Absent():
                return Absent()
        assert_never(self)

    def ap(self, other: Maybe[Any]) -> Maybe[Any]:
        """
        Apply the function held by this container to ``other``'s payload.

        ``Present(fn).ap(other)`` is exactly ``other.map(fn)``. On Absent
        the result is Absent and ``other`` is never touched.
        """
        match self:
            case Present(fn):
                return other.map(fn)
            case Absent():
                return Absent()
        assert_never(self)

    def default(self, thunk: Callable[[], T | None]) -> Maybe[T]:
        """
        Fall back to ``thunk()`` if Absent.

        The thunk's result goes through ``to_optional``, so a thunk that
        returns None yields Absent again. Present is returned unchanged and
        the thunk is never called.
        """
        match self:
            case Present():
                return self
            case Absent():
                return to_optional(thunk())
        assert_never(self)

    def cata(
        self,
        cases: Mapping[str, Callable[..., R]] | None = None,
        /,
        **handlers: Callable[..., R],
    ) -> R:
        """
        Exhaustive case analysis.

        Handlers are keyed ``Present`` (called with the payload) and
        ``Absent`` (called with no arguments), passed as a mapping, as
        keyword arguments, or both. Both must be callable, otherwise
        MissingCaseHandlerError is raised before either handler runs.

        >>> Present(2).cata({"Present": lambda x: x * 10, "Absent": lambda: 0})
        20
        """
        on = require_handlers("Maybe", _CASES, cases, handlers)
        match self:
            case Present(value):
                return on["Present"](value)
            case Absent():
                return on["Absent"]()
        assert_never(self)

    def describe(self) -> str:
        """Debug rendering: ``Present(<payload>)`` or ``Absent``."""
        match self:
            case Present(value):
                return f"Present({value})"
            case Absent():
                return "Absent"
        assert_never(self)

    def is_present(self) -> bool:
        return isinstance(self, Present)

    def is_absent(self) -> bool:
        return isinstance(self, Absent)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Present(Maybe[T]):
    """A value that is there. The payload is never inspected."""

    value: T

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@dataclass(frozen=True, slots=True)
class Absent(Maybe[Any]):
    """No value. All instances are equal."""

    def __repr__(self) -> str:
        return "Absent()"


def to_optional(value: T | None) -> Maybe[T]:
    """
    Smart constructor: None becomes Absent, anything else Present.

    Only None counts as "no value"; falsy payloads such as 0, "" or False
    are Present.

    >>> to_optional(0)
    Present(0)
    >>> to_optional(None)
    Absent()
    """
    if value is None:
        return Absent()
    return Present(value)


__all__ = ["Maybe", "Present", "Absent", "to_optional"]
