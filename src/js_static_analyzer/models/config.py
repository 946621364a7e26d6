"""Configuration models for the analyzer."""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from js_static_analyzer.constants import SourceDefaults


class AnalyzerConfig(BaseModel):
    """Resolved run configuration.

    Built from command-line flags and environment variables by
    ``core.config.parse_args_and_get_config``.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(default=SourceDefaults.DEFAULT_PATH, description="File or directory to analyze")
    log_level: str = Field(default="WARNING", description="DEBUG, INFO, WARNING or ERROR")
    log_file: Optional[str] = Field(default=None, description="Log file path (stderr when unset)")
    color: bool = Field(default=True, description="Use ANSI colors in the console report")
    extensions: Tuple[str, ...] = SourceDefaults.EXTENSIONS
    skip_directories: Tuple[str, ...] = SourceDefaults.SKIP_DIRECTORIES

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(f"Invalid log level '{v}'. Must be one of DEBUG, INFO, WARNING, ERROR")
        return level

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path must not be empty")
        return v
