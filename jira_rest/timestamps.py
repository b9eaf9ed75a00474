from __future__ import annotations

import re
from datetime import datetime, timezone

from .errors import DecodeError

_ZULU = re.compile(r"^(?P<body>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?)Z$")
_COMPACT_OFFSET = re.compile(
    r"^(?P<body>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?)(?P<sign>[+-])(?P<hh>\d{2})(?P<mm>\d{2})$"
)
_FRACTION = re.compile(r"\.(\d+)")


def _trim_fraction(body: str) -> str:
    # fromisoformat on older interpreters only accepts 3 or 6 fractional digits
    match = _FRACTION.search(body)
    if not match:
        return body
    digits = (match.group(1) + "000000")[:6]
    return f"{body[: match.start()]}.{digits}"


def parse_timestamp(value: object, path: str = "timestamp") -> datetime:
    """Parse a Jira timestamp into an aware ``datetime``.

    Two shapes are accepted: a trailing ``Z`` (``2020-01-01T09:00:00.000Z``)
    and a four digit offset (``2020-01-01T10:00:00.000+0100``), which is
    rewritten to ``+01:00`` first. Anything else raises ``DecodeError``.
    """
    if not isinstance(value, str):
        raise DecodeError(f"Expected string at {path}")
    candidate = value.strip()

    zulu = _ZULU.match(candidate)
    if zulu:
        iso = f"{_trim_fraction(zulu.group('body'))}+00:00"
    else:
        compact = _COMPACT_OFFSET.match(candidate)
        if not compact:
            raise DecodeError(f"Unsupported timestamp format at {path}: {value!r}")
        iso = (
            f"{_trim_fraction(compact.group('body'))}"
            f"{compact.group('sign')}{compact.group('hh')}:{compact.group('mm')}"
        )

    try:
        return datetime.fromisoformat(iso)
    except ValueError as exc:
        raise DecodeError(f"Invalid timestamp at {path}: {value!r}") from exc


def format_timestamp(value: datetime) -> str:
    """Render ``value`` the way the worklog endpoint expects it.

    The result is UTC with millisecond precision and a ``+0000`` offset, e.g.
    ``2020-01-01T09:00:00.000+0000``.
    """
    if value.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "+0000")
