"""
cinex.config - YAML config loading and validation.

Handles finding and loading cinex.yaml from the working directory (or any
parent), applying defaults, and validating all parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cinex.codec.layouts import RECORD_SEPARATOR
from cinex.exceptions import ConfigError

CONFIG_FILENAME = "cinex.yaml"


class CinexConfig(BaseModel):
    """Resolved configuration for the cinex tools."""

    strict: bool = False
    record_separator: str = RECORD_SEPARATOR
    line_ending: str = "lf"
    encoding: str = "utf-8"
    json_indent: int = Field(default=2, ge=0)
    export_dir: Path | None = None

    config_path: Path | None = None

    @field_validator("record_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        if not v.startswith("//") or "\n" in v:
            raise ValueError("record_separator must be a single line starting with '//'")
        return v

    @field_validator("line_ending")
    @classmethod
    def validate_line_ending(cls, v: str) -> str:
        valid = {"lf", "crlf"}
        if v not in valid:
            raise ValueError(f"line_ending must be one of: {valid}")
        return v

    @property
    def newline(self) -> str:
        return "\r\n" if self.line_ending == "crlf" else "\n"


def find_config_file(start: Path | None = None) -> Path | None:
    """Find cinex.yaml in ``start`` (default: cwd) or any parent directory."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path | None = None) -> CinexConfig:
    """Load and validate configuration.

    Args:
        path: Explicit config file; when None, cinex.yaml is searched for
            from the working directory upward and defaults are used if none
            exists

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or invalid
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return CinexConfig()
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{path} must contain a mapping")

    try:
        return CinexConfig(**{**raw_config, "config_path": path})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def create_default_config() -> dict[str, Any]:
    """Create the default config written by ``cinex init``."""
    return {
        "strict": False,
        "record_separator": RECORD_SEPARATOR,
        "line_ending": "lf",
        "encoding": "utf-8",
        "json_indent": 2,
        "export_dir": None,
    }


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
