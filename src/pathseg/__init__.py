"""Pathseg — typed single-segment matching for path-like strings.

Decides whether one raw path segment conforms to one template segment
(a literal, a typed variable, or the end of the path) and, if so,
returns a typed value.

Basic usage::

    from pathseg import SegType, Static, Var, match_segment

    match_segment(Static("users"), "users")         # Matched(StringValue("users"))
    match_segment(Var("id", SegType.NUMBER), "42")  # Matched(NumberValue(42.0), name="id")

    result = match_segment(Var("day", SegType.DATE), "2021-13-01")
    if not result:
        print(result)  # at 'day': expected date, got '2021-13-01'
"""

import importlib

__version__ = "0.1.0-dev"

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    # Errors
    "ConfigurationError": "pathseg.errors",
    "InvalidSegmentType": "pathseg.errors",
    "InvalidVariableName": "pathseg.errors",
    "PathsegError": "pathseg.errors",
    # Config
    "MatchConfig": "pathseg.config",
    # Values
    "DateValue": "pathseg.segments.values",
    "NumberValue": "pathseg.segments.values",
    "SegType": "pathseg.segments.values",
    "StringValue": "pathseg.segments.values",
    "TerminusValue": "pathseg.segments.values",
    # Results
    "Matched": "pathseg.segments.result",
    "NamedMismatch": "pathseg.segments.result",
    "UnnamedMismatch": "pathseg.segments.result",
    # Segments
    "Static": "pathseg.segments.segment",
    "Terminus": "pathseg.segments.segment",
    "Var": "pathseg.segments.segment",
    "match_segment": "pathseg.segments.segment",
    "coerce": "pathseg.segments.params",
    # Template building
    "parse_segment": "pathseg.segments.parse",
    "seg_type_from_token": "pathseg.segments.parse",
    "var_from_config": "pathseg.segments.parse",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathseg`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
