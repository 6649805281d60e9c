"""Segments — typed single-segment matching.

Template segments are built once during setup and matched against raw
path segments many times::

    from pathseg.segments import Var, SegType, match_segment

    result = match_segment(Var("id", SegType.NUMBER), "42")
    if result:
        name, value = result.as_param()  # ("id", 42.0)
"""

from pathseg.segments.params import CONVERTERS, DATE_PARSER, DateParser, coerce
from pathseg.segments.parse import (
    SEG_TYPE_TOKENS,
    parse_segment,
    seg_type_from_token,
    var_from_config,
)
from pathseg.segments.result import (
    Matched,
    MatchError,
    MatchResult,
    NamedMismatch,
    UnnamedMismatch,
)
from pathseg.segments.segment import Segment, Static, Terminus, Var, match_segment
from pathseg.segments.values import (
    TERMINUS,
    DateValue,
    MatchValue,
    NumberValue,
    SegType,
    StringValue,
    TerminusValue,
)

__all__ = [
    "CONVERTERS",
    "DATE_PARSER",
    "SEG_TYPE_TOKENS",
    "TERMINUS",
    "DateParser",
    "DateValue",
    "MatchError",
    "MatchResult",
    "MatchValue",
    "Matched",
    "NamedMismatch",
    "NumberValue",
    "SegType",
    "Segment",
    "Static",
    "StringValue",
    "Terminus",
    "TerminusValue",
    "UnnamedMismatch",
    "Var",
    "coerce",
    "match_segment",
    "parse_segment",
    "seg_type_from_token",
    "var_from_config",
]
