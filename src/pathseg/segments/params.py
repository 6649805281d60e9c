"""Segment value coercion.

Built-in grammars for variable segments like ``{id:number}``. Each
grammar must match the whole input — a valid prefix followed by
anything else is a mismatch, never a partial success.
"""

import datetime
import re
from collections.abc import Callable

from pathseg.segments.result import UnnamedMismatch
from pathseg.segments.values import (
    DateValue,
    MatchValue,
    NumberValue,
    SegType,
    StringValue,
)

# Decimal float literal: 1, -1, 1.5, 1., .5, 1e10, 2.5E-3
_NUMBER_PATTERN = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

# Extended ISO calendar date: 2021-01-31
_DATE_PATTERN = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"


class DateParser:
    """Parses extended ISO calendar dates.

    Holds nothing but a compiled pattern, so one instance is shared by
    every match in the process without locking.
    """

    __slots__ = ("_regex",)

    def __init__(self, pattern: str = _DATE_PATTERN) -> None:
        self._regex = re.compile(pattern, re.ASCII)

    def parse_date(self, value: str) -> datetime.date | None:
        """Return the date *value* names, or None if it is not one.

        The shape must match exactly and the day must exist on the
        calendar (``2021-02-29`` is rejected, ``2024-02-29`` is not).
        """
        m = self._regex.fullmatch(value)
        if m is None:
            return None
        try:
            return datetime.date(int(m["year"]), int(m["month"]), int(m["day"]))
        except ValueError:
            return None


DATE_PARSER = DateParser()


def _to_string(value: str) -> MatchValue | None:
    return StringValue(value)


def _to_number(value: str) -> MatchValue | None:
    return NumberValue(float(value))


def _to_date(value: str) -> MatchValue | None:
    parsed = DATE_PARSER.parse_date(value)
    if parsed is None:
        return None
    return DateValue(parsed)


# (regex_pattern, converter) for each segment type
CONVERTERS: dict[SegType, tuple[str, Callable[[str], MatchValue | None]]] = {
    SegType.STRING: (r".*", _to_string),
    SegType.NUMBER: (_NUMBER_PATTERN, _to_number),
    SegType.DATE: (_DATE_PATTERN, _to_date),
}

_COMPILED: dict[SegType, re.Pattern[str]] = {
    seg_type: re.compile(pattern, re.ASCII | re.DOTALL)
    for seg_type, (pattern, _) in CONVERTERS.items()
}


def coerce(seg_type: SegType, value: str) -> MatchValue | UnnamedMismatch:
    """Coerce a raw segment string to the value domain of *seg_type*.

    Returns the typed value on success, or an ``UnnamedMismatch`` whose
    ``expected`` is the type name and ``got`` is the raw input.
    Never raises for a ``str`` input.
    """
    _, converter = CONVERTERS[seg_type]
    if _COMPILED[seg_type].fullmatch(value) is not None:
        result = converter(value)
        if result is not None:
            return result
    return UnnamedMismatch(expected=str(seg_type), got=value)
