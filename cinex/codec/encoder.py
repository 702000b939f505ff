"""
cinex.codec.encoder - Record graph to EXPORT text.

Writes sections in the fixed order the engine reads them: Cinema header,
shots, sync points, actions, participants, the constant Action-1/Action-2
sections, then camera paths with their keyframes. Positional indices are
taken from list position, never from the stored ``index`` fields.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from cinex.codec.actions import action_row
from cinex.codec.fields import FieldSpec
from cinex.codec.formatting import format_guid, format_value
from cinex.codec.layouts import (
    BOILERPLATE_COLUMNS,
    BOILERPLATE_SECTIONS,
    CAMERA_PATH_FIELDS,
    CINEMA_FIELDS,
    KEYFRAME_FIELDS,
    KEYFRAMES_HEADER,
    PARTICIPANTS_DESCRIPTOR,
    RECORD_SEPARATOR,
    SHOT_FIELDS,
    SYNC_POINT_FIELDS,
)
from cinex.logging import logger
from cinex.models import CameraPath, Cinema

VALUE_INDENT = "   "


def section_header(name: str, count: int = 1) -> str:
    return f"[ {name} : {count} ]"


def render_fields(
    specs: Iterable[FieldSpec],
    row: dict[str, Any],
    prefix: str = "",
) -> tuple[str, str]:
    """Render the descriptor line and value line for one section.

    Each column is as wide as the larger of its label and its declared
    width, so labels and values line up.

    Args:
        specs: Section layout
        row: Values keyed by each spec's ``attr``
        prefix: Section namespace prepended to each label

    Returns:
        Tuple of (descriptor line, value line)
    """
    labels = []
    cells = []
    for spec in specs:
        label = f"{prefix}{spec.label}:{spec.tag}"
        cell = format_value(row[spec.attr], spec.tag)
        width = max(len(label), spec.width, len(cell))
        labels.append(label.ljust(width))
        cells.append(cell.ljust(width))

    descriptor = " { " + " ".join(labels).rstrip() + " }"
    values = VALUE_INDENT + " ".join(cells).rstrip()
    return descriptor, values


def _section(name: str, specs: Iterable[FieldSpec], row: dict[str, Any], prefix: str = "") -> list[str]:
    descriptor, values = render_fields(specs, row, prefix)
    return [section_header(name), descriptor, values]


def _cinema_row(cinema: Cinema) -> dict[str, Any]:
    row = cinema.properties.model_dump()
    row.update(
        guid=cinema.guid,
        obj_name=cinema.obj_name,
        duration=cinema.duration,
        n_shots=len(cinema.shots),
        n_sync_points=len(cinema.sync_points),
        n_actions=len(cinema.actions),
        n_participants=len(cinema.participants),
    )
    return row


def _boilerplate_section(name: str) -> list[str]:
    descriptor = " { " + " ".join(f"{name}\\{label}" for label, _, _ in BOILERPLATE_COLUMNS) + " }"
    values = VALUE_INDENT + " ".join(text.ljust(width) for _, text, width in BOILERPLATE_COLUMNS)
    return [section_header(name), descriptor, values]


def encode_camera_path(path: CameraPath) -> list[str]:
    """Render a CameraPath section and its nested Keyframes section."""
    lines = _section("CameraPath", CAMERA_PATH_FIELDS, path.model_dump())
    lines.append(KEYFRAMES_HEADER)
    lines.append(" { " + " ".join(f"{spec.label}:{spec.tag}" for spec in KEYFRAME_FIELDS) + " }")
    for keyframe in path.keyframes:
        cells = [
            format_value(value, spec.tag, spec.width)
            for spec, value in zip(KEYFRAME_FIELDS, keyframe.as_row())
        ]
        lines.append(VALUE_INDENT + " ".join(cells))
    lines.append("")
    return lines


def encode(cinema: Cinema) -> str:
    """Encode one record as EXPORT text.

    Args:
        cinema: Record to encode; it is not modified

    Returns:
        EXPORT text for the record
    """
    lines = _section("Cinema", CINEMA_FIELDS, _cinema_row(cinema))

    for i, shot in enumerate(cinema.shots):
        name = f"Shot{i}"
        lines += _section(name, SHOT_FIELDS, shot.model_dump(), f"{name}\\")
    lines.append("")

    for i, sync_point in enumerate(cinema.sync_points):
        name = f"SyncPoint{i}"
        lines += _section(name, SYNC_POINT_FIELDS, sync_point.model_dump(), f"{name}\\")
    lines.append("")
    lines.append("")

    for i, action in enumerate(cinema.actions):
        name = f"Action{i}"
        layout, row = action_row(action)
        lines += _section(name, layout, row, f"{name}\\")
    lines.append("")

    lines.append(section_header("Participants", len(cinema.participants)))
    lines.append(PARTICIPANTS_DESCRIPTOR)
    for participant in cinema.participants:
        lines.append(f"{VALUE_INDENT}{format_guid(participant)} ")

    for name in BOILERPLATE_SECTIONS:
        lines += _boilerplate_section(name)
    lines.append("")

    for path in cinema.camera_paths:
        lines.append("\n".join(encode_camera_path(path)))

    logger.debug(
        f"Encoded cinema {cinema.obj_name!r}: {len(cinema.shots)} shots, "
        f"{len(cinema.actions)} actions, {len(cinema.camera_paths)} camera paths"
    )
    return "\n".join(lines)


def encode_all(cinemas: list[Cinema], separator: str = RECORD_SEPARATOR) -> str:
    """Encode several records into one document.

    Args:
        cinemas: Records in output order
        separator: Comment line written between records

    Returns:
        EXPORT text with records separated by the comment line
    """
    parts = []
    for i, cinema in enumerate(cinemas):
        if i > 0:
            parts.append(f"\n{separator}\n\n")
        parts.append(encode(cinema))
    return "".join(parts)
