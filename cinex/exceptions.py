"""
cinex.exceptions - Custom exception classes.

All Cinex-specific exceptions inherit from CinexError.
"""

from __future__ import annotations

from typing import Any


class CinexError(Exception):
    """Base exception for all Cinex errors."""

    pass


class ConfigError(CinexError):
    """Configuration loading or validation error."""

    pass


class DecodeError(CinexError):
    """EXPORT text could not be decoded into any usable record."""

    def __init__(self, message: str, diagnostics: list[Any] | None = None):
        self.message = message
        self.diagnostics = diagnostics or []
        super().__init__(message)


class InterchangeError(CinexError):
    """JSON interchange data is malformed or fails validation."""

    pass
