"""
Sequence filters and batch helpers over containers.

Batch code tends to end up with a list of mixed outcomes. The filters pick
one variant out of such a list; the collectors fold a list of Results into
a single outcome.

The filters identify variants only through the family's own predicate
(``is_present``, ``is_success``, ...). They never call map/chain/cata on
the elements, never raise for an element of the wrong kind, and never
mutate the input.

Architecture:
    ::

        [Present(1), Absent(), Present('a'), 'x']  ── justs ──>  [Present(1), Present('a')]
        [Success(1), Present('a'), Failure('e')]   ── oks ───>   [Success(1)]

        [Success(1), Success(2)]                   ── collect_results ──> Success([1, 2])
        [Success(1), Failure(a), Failure(b)]       ── collect_results ──> Failure(a)

        [Success(1), Failure(a), Success(2)]       ── partition_results ──> ([1, 2], [a])

Examples:
    >>> from spinefp.core.maybe import Absent, Present
    >>> justs([Present(19), Absent(), "hello", Present(-78)])
    [Present(19), Present(-78)]

Tags:
    sequence-filter, batch-processing, spine-fp

Doc-Types:
    - API Reference
    - Batch Processing Guide
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from spinefp.core.maybe import Maybe
from spinefp.core.result import Failure, Result, Success

T = TypeVar("T")


def justs(items: Iterable[Any]) -> list[Maybe[Any]]:
    """Keep only the Present values, in their original order."""
    return [item for item in items if isinstance(item, Maybe) and item.is_present()]


def nothings(items: Iterable[Any]) -> list[Maybe[Any]]:
    """Keep only the Absent values, in their original order."""
    return [item for item in items if isinstance(item, Maybe) and item.is_absent()]


def oks(items: Iterable[Any]) -> list[Result[Any, Any]]:
    """Keep only the Success values, in their original order."""
    return [item for item in items if isinstance(item, Result) and item.is_success()]


def failures(items: Iterable[Any]) -> list[Result[Any, Any]]:
    """Keep only the Failure values, in their original order."""
    return [item for item in items if isinstance(item, Result) and item.is_failure()]


def collect_results(results: Iterable[Result[T, Any]]) -> Result[list[T], Any]:
    """
    Collect Results into a Result of list (fail-fast).

    Returns Success with every value, in order, if all elements are Success.
    Otherwise returns the first Failure; elements after it are not looked at.

    >>> collect_results([Success(1), Success(2)])
    Success([1, 2])
    >>> collect_results([])
    Success([])
    """
    values = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure():
                return result
            case _:
                raise TypeError(f"collect_results expects Result values, got {type(result).__name__}")
    return Success(values)


def partition_results(results: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """
    Split into (success values, failure errors).

    Elements that are not Results are ignored, same as the filters.
    """
    values = []
    errors = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
    return values, errors


__all__ = [
    "justs",
    "nothings",
    "oks",
    "failures",
    "collect_results",
    "partition_results",
]
