"""Template segments and single-segment matching."""

from dataclasses import dataclass

from pathseg.config import DEFAULT_CONFIG, MatchConfig
from pathseg.segments.params import coerce
from pathseg.segments.result import Matched, MatchResult, UnnamedMismatch
from pathseg.segments.values import TERMINUS, SegType, StringValue


@dataclass(frozen=True, slots=True)
class Static:
    """A literal segment: ``/users``. Matches only the exact text."""

    literal: str


@dataclass(frozen=True, slots=True)
class Var:
    """A named typed placeholder: ``/{id:number}``.

    ``name`` attributes both successful values and failures.
    """

    name: str
    seg_type: SegType = SegType.STRING


@dataclass(frozen=True, slots=True)
class Terminus:
    """End of path. Matches only the empty string."""


type Segment = Static | Var | Terminus


def match_segment(
    segment: Segment,
    value: str,
    config: MatchConfig | None = None,
) -> MatchResult:
    """Match one raw path segment against a template segment.

    Returns ``Matched`` on success. Literal and terminus matches are
    unnamed; variable matches carry the variable's name.

    Returns a mismatch on failure — the caller decides what a failed
    match means (a 404, trying the next route, ...)::

        match_segment(Static("users"), "users")
        # Matched(StringValue("users"))
        match_segment(Var("id", SegType.NUMBER), "abc")
        # NamedMismatch(name="id", expected="number", got="abc")

    Raises ``TypeError`` only if *segment* is not a segment at all.
    """
    match segment:
        case Static(literal=literal):
            if value == literal:
                return Matched(StringValue(value))
            return UnnamedMismatch(expected=literal, got=value)
        case Terminus():
            if not value:
                return Matched(TERMINUS)
            label = (config or DEFAULT_CONFIG).terminus_label
            return UnnamedMismatch(expected=label, got=value)
        case Var(name=name, seg_type=seg_type):
            coerced = coerce(seg_type, value)
            if isinstance(coerced, UnnamedMismatch):
                return coerced.with_name(name)
            return Matched(coerced, name=name)
        case _:
            msg = f"Expected a Static, Var, or Terminus segment, got {type(segment).__name__}."
            raise TypeError(msg)
