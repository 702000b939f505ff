"""
cinex.codec.fields - Field descriptors and value binding.

A section's schema is declared by a descriptor line such as
``{ Name:s Type:d StartOrient:fff }``. Each type tag consumes a fixed
number of value tokens; this module binds tokens to field names and
converts the raw text of each field into a Python value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from cinex.codec.tokenizer import tokenize

TYPE_ARITY: dict[str, int] = {
    "s": 1,
    "g": 1,
    "d": 1,
    "f": 1,
    "fff": 3,
    "ffffff": 6,
    "dddd": 4,
}

_DESCRIPTOR_RE = re.compile(r"\{([^}]*)\}")


@dataclass(frozen=True)
class FieldSpec:
    """One column of a section layout.

    Attributes:
        label: Field name as written in the descriptor line (without prefix)
        tag: Type tag (s, g, d, f, fff, ffffff, dddd)
        attr: Attribute (or row key) the column maps to
        width: Minimum column width used when encoding
        derived: Column is computed on encode and ignored on decode
    """

    label: str
    tag: str
    attr: str
    width: int = 0
    derived: bool = False


def is_descriptor_line(line: str) -> bool:
    return line.strip().startswith("{")


def parse_descriptor(line: str) -> list[tuple[str, str]]:
    """Parse a descriptor line into (name, type tag) pairs.

    Args:
        line: Line of the form ``{ name1:type1 name2:type2 ... }``

    Returns:
        Field name/tag pairs in declaration order, empty if the line has no
        braces
    """
    match = _DESCRIPTOR_RE.search(line)
    if not match:
        return []

    fields = []
    for entry in match.group(1).split():
        name, _, tag = entry.partition(":")
        fields.append((name, tag))
    return fields


def bind_values(descriptor_line: str, value_line: str) -> dict[str, str]:
    """Bind the tokens of a value line to the fields of a descriptor line.

    Multi-component fields consume their full arity and are joined with
    single spaces. A component missing at the end of the line reads as
    ``0``. Once the tokens run out, the remaining fields are left unbound.

    Args:
        descriptor_line: The ``{ ... }`` schema line
        value_line: The line holding the values

    Returns:
        Mapping of field name to raw text
    """
    fields = parse_descriptor(descriptor_line)
    tokens = tokenize(value_line)
    values: dict[str, str] = {}

    position = 0
    for name, tag in fields:
        if position >= len(tokens):
            break
        arity = TYPE_ARITY.get(tag, 1)
        parts = tokens[position : position + arity]
        parts += ["0"] * (arity - len(parts))
        values[name] = " ".join(parts)
        position += arity

    return values


def parse_string(raw: str) -> str:
    """Strip one leading and one trailing double quote."""
    if raw.startswith('"'):
        raw = raw[1:]
    if raw.endswith('"'):
        raw = raw[:-1]
    return raw


def parse_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return 0


def _parse_components(raw: str, count: int, parse: Any) -> tuple[Any, ...]:
    parts = [parse(p) for p in raw.split()[:count]]
    parts += [parse("0")] * (count - len(parts))
    return tuple(parts)


def convert_value(raw: str, tag: str) -> Any:
    """Convert the raw text of one field according to its type tag.

    Args:
        raw: Raw field text as produced by bind_values
        tag: Type tag

    Returns:
        str for ``s``/``g``, int for ``d``, float for ``f``, and tuples for
        the multi-component tags
    """
    if tag == "s":
        return parse_string(raw)
    if tag == "d":
        return parse_int(raw)
    if tag == "f":
        return parse_float(raw)
    if tag == "fff":
        return _parse_components(raw, 3, parse_float)
    if tag == "ffffff":
        return _parse_components(raw, 6, parse_float)
    if tag == "dddd":
        return _parse_components(raw, 4, parse_int)
    return raw


def extract_fields(
    values: dict[str, str],
    specs: tuple[FieldSpec, ...],
    prefix: str = "",
) -> dict[str, Any]:
    """Convert bound values to model attributes for the given layout.

    Fields absent from ``values`` are left out so model defaults apply.

    Args:
        values: Output of bind_values
        specs: Layout describing label, tag and attribute of each column
        prefix: Section namespace prepended to each label (e.g. ``Shot3\\``)

    Returns:
        Mapping of attribute name to converted value
    """
    result: dict[str, Any] = {}
    for spec in specs:
        if spec.derived:
            continue
        raw = values.get(f"{prefix}{spec.label}")
        if raw is None:
            continue
        result[spec.attr] = convert_value(raw, spec.tag)
    return result
