"""
cinex.codec.formatting - Value rendering for the EXPORT format.

Canonical text for integers, floats, vectors, quoted strings and
identifiers. Column widths only right-pad for alignment.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def format_int(value: float, width: int = 0) -> str:
    """Render an integer, truncating toward zero.

    Args:
        value: Number to render
        width: Minimum column width (right-padded with spaces)

    Returns:
        Base-10 integer text
    """
    return str(int(value)).ljust(width)


def format_float(value: float, width: int = 0) -> str:
    """Render a float with up to six fractional digits, never fewer than two.

    ``1.5`` renders as ``1.50``, ``1.0`` as ``1.00`` and ``1.256637`` is
    left unchanged.

    Args:
        value: Number to render
        width: Minimum column width (right-padded with spaces)

    Returns:
        Float text
    """
    if value == 0:
        value = 0.0
    text = f"{value:.6f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(2, "0")
    return f"{whole}.{fraction}".ljust(width)


def format_floats(values: Iterable[float], width: int = 0) -> str:
    """Render a float vector as space-separated components."""
    return " ".join(format_float(v) for v in values).ljust(width)


def format_ints(values: Iterable[float], width: int = 0) -> str:
    """Render an integer vector as space-separated components."""
    return " ".join(format_int(v) for v in values).ljust(width)


def format_string(value: str, width: int = 0) -> str:
    """Render a string in double quotes. Embedded quotes are not escaped."""
    return f'"{value}"'.ljust(width)


def format_guid(value: str, width: int = 0) -> str:
    """Render an identifier verbatim."""
    return value.ljust(width)


def format_value(value: Any, tag: str, width: int = 0) -> str:
    """Render a value according to its field type tag.

    Args:
        value: Python value (str, int, float or tuple)
        tag: Type tag (s, g, d, f, fff, ffffff, dddd)
        width: Minimum column width

    Returns:
        Rendered field text
    """
    if tag == "s":
        return format_string(value, width)
    if tag == "g":
        return format_guid(value, width)
    if tag == "d":
        return format_int(value, width)
    if tag == "f":
        return format_float(value, width)
    if tag in ("fff", "ffffff"):
        return format_floats(value, width)
    if tag == "dddd":
        return format_ints(value, width)
    raise ValueError(f"Unknown field type tag: {tag}")
