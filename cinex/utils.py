"""
cinex.utils - Shared utility functions.

Contains common functions used by the command-line tools and reports.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Callable

from cinex.models import Cinema

MULTI_RECORD_FILENAME = "CINEMAS.EXPORT.TXT"


def export_filename(cinemas: list[Cinema]) -> str:
    """Pick the conventional file name for an export.

    Args:
        cinemas: Records that will be written together

    Returns:
        ``<ObjName>.EXPORT.TXT`` (whitespace runs become underscores) for a
        single record, ``CINEMAS.EXPORT.TXT`` otherwise
    """
    if len(cinemas) == 1:
        name = re.sub(r"\s+", "_", cinemas[0].obj_name.strip()) or "Cinema"
        return f"{name}.EXPORT.TXT"
    return MULTI_RECORD_FILENAME


def guid_factory() -> Callable[[], str]:
    """Return a generator of fresh ``XXXXXXXX_XXXXXXXX`` identifiers."""

    def new_guid() -> str:
        digits = uuid.uuid4().hex[:16].upper()
        return f"{digits[:8]}_{digits[8:]}"

    return new_guid


def format_duration(seconds: float) -> str:
    """Format seconds as M:SS.ss for report and table display."""
    minutes = int(seconds // 60)
    secs = seconds - minutes * 60
    return f"{minutes}:{secs:05.2f}"
