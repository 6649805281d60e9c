"""Tests for pathseg.config — MatchConfig frozen dataclass."""

import pytest

from pathseg.config import DEFAULT_CONFIG, MatchConfig
from pathseg.errors import ConfigurationError


class TestMatchConfig:
    def test_defaults(self) -> None:
        cfg = MatchConfig()

        assert cfg.terminus_label == "<Terminus>"
        assert cfg.param_open == "{"
        assert cfg.param_close == "}"
        assert cfg.type_separator == ":"

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == MatchConfig()

    def test_override(self) -> None:
        cfg = MatchConfig(terminus_label="<end>", param_open="<", param_close=">")

        assert cfg.terminus_label == "<end>"
        assert cfg.param_open == "<"
        assert cfg.param_close == ">"

    def test_frozen(self) -> None:
        cfg = MatchConfig()

        with pytest.raises(AttributeError):
            cfg.terminus_label = "<end>"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["param_open", "param_close", "type_separator"])
    def test_empty_syntax_rejected(self, field: str) -> None:
        with pytest.raises(ConfigurationError, match=field):
            MatchConfig(**{field: ""})

    def test_identical_delimiters_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="must differ"):
            MatchConfig(param_open="|", param_close="|")
