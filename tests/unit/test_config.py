"""Unit tests for command-line configuration."""

import pytest

from js_static_analyzer.core.config import _create_argument_parser, build_config
from js_static_analyzer.models.config import AnalyzerConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


def config_for(*argv: str) -> AnalyzerConfig:
    return build_config(_create_argument_parser().parse_args(list(argv)))


class TestBuildConfig:
    """Test flag, environment and default precedence."""

    def test_defaults(self):
        config = config_for()
        assert config.path == "."
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.color is True
        assert config.extensions == (".js",)
        assert config.skip_directories == ("node_modules",)

    def test_positional_path(self):
        assert config_for("src/").path == "src/"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", "/tmp/analyzer.log")
        config = config_for()
        assert config.log_level == "DEBUG"
        assert config.log_file == "/tmp/analyzer.log"

    def test_flag_beats_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert config_for("--log-level", "ERROR").log_level == "ERROR"

    def test_no_color_flag(self):
        assert config_for("--no-color").color is False

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert config_for().color is False

    def test_invalid_env_level_rejected(self, monkeypatch):
        from pydantic import ValidationError

        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            config_for()


class TestAnalyzerConfig:
    def test_frozen(self):
        from pydantic import ValidationError

        config = AnalyzerConfig()
        with pytest.raises(ValidationError):
            config.path = "other"

    def test_empty_path_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            AnalyzerConfig(path="  ")
