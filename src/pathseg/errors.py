"""Pathseg exception hierarchy.

Only template configuration raises. A value that does not match a
segment is an ordinary outcome and comes back as a mismatch result,
never as an exception.
"""

from dataclasses import dataclass


class PathsegError(Exception):
    """Base for all pathseg-specific errors."""


class ConfigurationError(PathsegError):
    """Raised when a template segment or matcher configuration is invalid.

    Typically raised while templates are being built, before any value
    is matched.
    """


@dataclass(frozen=True, slots=True)
class InvalidSegmentType(ConfigurationError):
    """A type token did not name a known segment type.

    The offending token is kept for diagnostics.
    """

    token: str

    def __str__(self) -> str:
        return f"Invalid segment type: {self.token!r}"


@dataclass(frozen=True, slots=True)
class InvalidVariableName(ConfigurationError):
    """A variable name is empty or not a valid identifier."""

    name: str

    def __str__(self) -> str:
        return (
            f"Invalid variable name {self.name!r}. "
            "Names must start with a letter or underscore and contain "
            "only letters, digits, and underscores."
        )
