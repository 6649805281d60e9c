"""Matcher configuration.

MatchConfig is a frozen dataclass — immutable after creation, shared
freely between threads, no string-key dict lookups.
"""

from dataclasses import dataclass

from pathseg.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Matcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MatchConfig(terminus_label="<end>", param_open="<", param_close=">")
    """

    # Expected-description reported when a terminus sees leftover input
    terminus_label: str = "<Terminus>"

    # Variable segment syntax: {name} or {name:type}
    param_open: str = "{"
    param_close: str = "}"
    type_separator: str = ":"

    def __post_init__(self) -> None:
        for field_name in ("param_open", "param_close", "type_separator"):
            if not getattr(self, field_name):
                msg = f"MatchConfig.{field_name} must not be empty."
                raise ConfigurationError(msg)
        if self.param_open == self.param_close:
            msg = (
                "MatchConfig.param_open and param_close must differ, "
                f"both are {self.param_open!r}."
            )
            raise ConfigurationError(msg)


DEFAULT_CONFIG = MatchConfig()
