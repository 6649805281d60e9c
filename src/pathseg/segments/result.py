"""Match results — a typed value on success, a diagnostic on failure.

Every match attempt returns one of three frozen dataclasses:

- ``Matched`` — the value conformed. ``name`` is set only when the
  segment was a variable.
- ``UnnamedMismatch`` — a literal or terminus did not match, or a raw
  coercion failed.
- ``NamedMismatch`` — a coercion failed underneath a variable, so the
  failure is attributed to that variable's name.

Results are truthy on success and falsy on failure, so callers that do
not need the diagnostic can write::

    result = match_segment(segment, part)
    if not result:
        return None
"""

from dataclasses import dataclass

from pathseg.segments.values import MatchValue


@dataclass(frozen=True, slots=True)
class Matched:
    """A successful match."""

    value: MatchValue
    name: str | None = None

    @property
    def is_named(self) -> bool:
        """True if the match came from a variable segment."""
        return self.name is not None

    def as_param(self) -> tuple[str, object]:
        """Return ``(name, python_value)`` for building a params dict.

        Raises ``ValueError`` for unnamed matches (literals and terminus),
        which carry nothing worth binding.
        """
        if self.name is None:
            msg = f"Cannot bind unnamed match {self.value!r} to a parameter."
            raise ValueError(msg)
        return self.name, self.value.value

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class UnnamedMismatch:
    """A failed match with no variable attribution."""

    expected: str
    got: str

    def with_name(self, name: str) -> "NamedMismatch":
        """Attribute this failure to the variable *name*."""
        return NamedMismatch(name=name, expected=self.expected, got=self.got)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"expected {self.expected}, got {self.got!r}"


@dataclass(frozen=True, slots=True)
class NamedMismatch:
    """A failed match attributed to a variable."""

    name: str
    expected: str
    got: str

    def with_name(self, name: str) -> "NamedMismatch":
        """Already attributed — the first name wins."""
        return self

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"at {self.name!r}: expected {self.expected}, got {self.got!r}"


type MatchError = UnnamedMismatch | NamedMismatch
type MatchResult = Matched | MatchError
