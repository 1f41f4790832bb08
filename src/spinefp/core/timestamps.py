"""
Strict ISO 8601 timestamp grammar and UTC rendering (stdlib-only).

``datetime.fromisoformat`` is lenient: it accepts dates without times,
times without seconds, spaces instead of ``T``, and naive values. The
adapters need the opposite, a single fully-specified shape that either
matches completely or is rejected:

    YYYY-MM-DDTHH:MM:SS.f+Z
    YYYY-MM-DDTHH:MM:SS.f+±HH:MM

Features:
    - **TIMESTAMP_PATTERN:** The compiled grammar (no partial matches)
    - **build_utc_datetime():** Calendar validation, offset applied, UTC result
    - **to_iso8601():** Canonical rendering, millisecond precision, ``Z`` suffix

Tags:
    timestamps, iso8601, utc, datetime, spine-fp, stdlib-only

Doc-Types:
    - API Reference
    - Utility Documentation

STDLIB ONLY.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone

TIMESTAMP_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"\.(?P<fraction>\d{1,9})"
    r"(?P<zone>Z|(?P<sign>[+-])(?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))",
    re.ASCII,
)


def build_utc_datetime(match: re.Match[str]) -> datetime:
    """
    Turn a TIMESTAMP_PATTERN match into an aware UTC datetime.

    Raises ValueError for out-of-range fields (month 13, Feb 30, hour 24,
    second 60, offset minute 60, offset of a day or more) and OverflowError
    when the offset pushes the instant outside the representable years.
    Fractional digits beyond microseconds are truncated.
    """
    fields = match.groupdict()
    microsecond = int(fields["fraction"][:6].ljust(6, "0"))

    tz = UTC
    if fields["zone"] != "Z":
        offset_minute = int(fields["offset_minute"])
        if offset_minute > 59:
            raise ValueError(f"offset minute out of range: {offset_minute}")
        offset = timedelta(hours=int(fields["offset_hour"]), minutes=offset_minute)
        if fields["sign"] == "-":
            offset = -offset
        tz = timezone(offset)

    parsed = datetime(
        int(fields["year"]),
        int(fields["month"]),
        int(fields["day"]),
        int(fields["hour"]),
        int(fields["minute"]),
        int(fields["second"]),
        microsecond,
        tzinfo=tz,
    )
    return parsed.astimezone(UTC)


def to_iso8601(dt: datetime | None) -> str | None:
    """
    Render as canonical UTC ISO 8601 with millisecond precision.

    Naive datetimes are taken to be UTC already.

    >>> to_iso8601(datetime(2019, 2, 13, 21, 4, 10, 984000, tzinfo=UTC))
    '2019-02-13T21:04:10.984Z'
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    rendered = dt.astimezone(UTC).isoformat(timespec="milliseconds")
    return rendered.removesuffix("+00:00") + "Z"


__all__ = ["TIMESTAMP_PATTERN", "build_utc_datetime", "to_iso8601"]
