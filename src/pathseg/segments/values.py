"""Segment types and the typed values produced by a successful match."""

import datetime
from dataclasses import dataclass
from enum import StrEnum


class SegType(StrEnum):
    """The value domain a variable segment coerces into.

    The member value doubles as the human-readable description used in
    mismatches (``expected number, got 'abc'``).
    """

    STRING = "string"
    NUMBER = "number"
    DATE = "date"


@dataclass(frozen=True, slots=True)
class StringValue:
    """Text matched verbatim."""

    value: str


@dataclass(frozen=True, slots=True)
class NumberValue:
    """A decimal number parsed to a 64-bit float."""

    value: float


@dataclass(frozen=True, slots=True)
class DateValue:
    """A calendar date."""

    value: datetime.date


@dataclass(frozen=True, slots=True)
class TerminusValue:
    """End of path. Carries no payload."""

    @property
    def value(self) -> None:
        return None


TERMINUS = TerminusValue()

type MatchValue = StringValue | NumberValue | DateValue | TerminusValue
