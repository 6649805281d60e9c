"""Building template segments from configuration.

Turns type tokens and single segment strings into ``Segment`` values::

    "users"         -> Static("users")
    "{id}"          -> Var("id", SegType.STRING)
    "{id:number}"   -> Var("id", SegType.NUMBER)
    "{day:date}"    -> Var("day", SegType.DATE)
    ""              -> Terminus()

Only one segment is parsed at a time. Splitting a full route path into
segments is the caller's job.
"""

import logging
import re

from pathseg.config import DEFAULT_CONFIG, MatchConfig
from pathseg.errors import ConfigurationError, InvalidSegmentType, InvalidVariableName
from pathseg.segments.segment import Segment, Static, Terminus, Var
from pathseg.segments.values import SegType

logger = logging.getLogger("pathseg.config")

SEG_TYPE_TOKENS: dict[str, SegType] = {
    "": SegType.STRING,
    "string": SegType.STRING,
    "number": SegType.NUMBER,
    "date": SegType.DATE,
}

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*", re.ASCII)

# Characters a static literal can never contain: they would split the
# path or start a query/fragment before the segment is ever matched.
_UNSAFE_LITERAL_RE = re.compile(r"[/?#\s]")


def seg_type_from_token(token: str) -> SegType:
    """Map a type token to a ``SegType``.

    Raises ``InvalidSegmentType`` for anything other than ``""``,
    ``"string"``, ``"number"``, or ``"date"``.
    """
    try:
        return SEG_TYPE_TOKENS[token]
    except KeyError:
        logger.debug("Rejected segment type token %r", token)
        raise InvalidSegmentType(token) from None


def var_from_config(name: str, token: str = "") -> Var:
    """Build a ``Var`` from a raw name and type token.

    Raises ``InvalidVariableName`` if *name* is not an identifier and
    ``InvalidSegmentType`` if *token* is unknown.
    """
    if not _NAME_RE.fullmatch(name):
        logger.debug("Rejected variable name %r", name)
        raise InvalidVariableName(name)
    var = Var(name=name, seg_type=seg_type_from_token(token))
    logger.debug("Built variable segment %s:%s", var.name, var.seg_type)
    return var


def parse_segment(text: str, config: MatchConfig | None = None) -> Segment:
    """Parse one segment's template text into a ``Segment``.

    The empty string is the terminus. Text wrapped in the configured
    delimiters is a variable; anything else is a static literal.

    Raises ``ConfigurationError`` for unbalanced delimiters or literals
    containing characters that cannot appear in a single path segment.
    """
    cfg = config or DEFAULT_CONFIG
    if not text:
        return Terminus()

    opens = text.startswith(cfg.param_open)
    closes = text.endswith(cfg.param_close)
    if opens and closes and len(text) >= len(cfg.param_open) + len(cfg.param_close):
        inner = text[len(cfg.param_open) : len(text) - len(cfg.param_close)]
        name, _, token = inner.partition(cfg.type_separator)
        return var_from_config(name, token)

    if cfg.param_open in text or cfg.param_close in text:
        msg = (
            f"Segment {text!r} mixes literal text with variable delimiters. "
            f"Variables must be written as a whole segment: "
            f"{cfg.param_open}name{cfg.type_separator}type{cfg.param_close}."
        )
        raise ConfigurationError(msg)

    if _UNSAFE_LITERAL_RE.search(text):
        msg = (
            f"Static segment {text!r} contains a character that cannot "
            "appear inside a single path segment ('/', '?', '#', or whitespace)."
        )
        raise ConfigurationError(msg)

    return Static(text)
