"""
cinex.reports.summary - Cinema summary report.

One page per EXPORT file: each record's shots, sync points, actions,
participants and camera paths, plus any decode diagnostics.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from cinex.codec.actions import variant_for_kind
from cinex.codec.decoder import Diagnostic
from cinex.keyframes import path_world_extent
from cinex.models import Action, Cinema
from cinex.reports.generator import ReportGenerator


def _action_detail(action: Action) -> str:
    params = action.params
    if params.kind == "dialog":
        return f"{params.speaker}: {params.sample}"
    if params.kind == "camera":
        return f"target {params.target}"
    if params.kind == "trigger":
        return params.trigger_name
    if params.kind in ("charAnim", "objAnim"):
        return params.anim_name
    if params.kind == "pop":
        return f"{params.object} -> {params.location}"
    return f"fx {params.fx_type}, color {' '.join(str(c) for c in params.color)}"


def _cinema_data(cinema: Cinema) -> dict[str, Any]:
    return {
        "guid": cinema.guid,
        "name": cinema.obj_name,
        "duration": cinema.duration,
        "skippable": bool(cinema.properties.skippable),
        "letterbox": bool(cinema.properties.letterbox),
        "shots": [
            {"index": i, **shot.model_dump(exclude={"index"})} for i, shot in enumerate(cinema.shots)
        ],
        "sync_points": [
            {"index": i, **sp.model_dump(exclude={"index"})} for i, sp in enumerate(cinema.sync_points)
        ],
        "actions": [
            {
                "index": i,
                "name": action.name,
                "type": variant_for_kind(action.kind).label,
                "kind": action.kind,
                "shot": action.shot,
                "sync_point": action.sync_point,
                "offset": action.offset,
                "duration": action.duration,
                "detail": _action_detail(action),
            }
            for i, action in enumerate(cinema.actions)
        ],
        "participants": list(cinema.participants),
        "camera_paths": [
            {
                "guid": path.guid,
                "keyframe_count": len(path.keyframes),
                "loops": path.loops,
                "play_speed": path.play_speed,
                "lookat": path.lookat_guid,
                "extent": path_world_extent(path),
            }
            for path in cinema.camera_paths
        ],
    }


def build_summary_data(
    cinemas: list[Cinema],
    source_name: str,
    diagnostics: list[Diagnostic] | None = None,
) -> dict[str, Any]:
    """Collect the template data for a summary report."""
    return {
        "source_name": source_name,
        "generated_date": datetime.now().strftime("%Y-%m-%d %H:%M"),
        "cinema_count": len(cinemas),
        "cinemas": [_cinema_data(c) for c in cinemas],
        "diagnostics": [str(d) for d in diagnostics or []],
    }


def generate_summary(
    cinemas: list[Cinema],
    source_name: str,
    output_path: Path,
    diagnostics: list[Diagnostic] | None = None,
    open_browser: bool = False,
) -> Path:
    """Generate the summary report.

    Args:
        cinemas: Decoded records
        source_name: Name of the EXPORT file shown in the title
        output_path: Where to write the HTML file
        diagnostics: Decode diagnostics to list
        open_browser: Whether to open in browser

    Returns:
        Path to generated report
    """
    data = build_summary_data(cinemas, source_name, diagnostics)

    generator = ReportGenerator()
    result_path = generator.render("summary.html", data, output_path)

    if open_browser:
        generator.open_in_browser(result_path)

    return result_path
