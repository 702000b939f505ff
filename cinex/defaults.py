"""
cinex.defaults - Factories for new records.

Default shots, sync points, actions and camera paths as an editor creates
them. Identifiers are never generated here: callers pass the GUID, or a
callable that produces one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from cinex.codec.actions import variant_for_kind
from cinex.models import (
    Action,
    CameraPath,
    Cinema,
    CinemaProperties,
    Keyframe,
    Shot,
    SyncPoint,
)

M = TypeVar("M", bound=BaseModel)

DEFAULT_CINEMA_GUID = "CA3DDD8F_11110000"

# New actions start from the decoder defaults except for these placeholders
_NEW_ACTION_OVERRIDES: dict[str, dict[str, Any]] = {
    "dialog": {"sample": "Dialog text here"},
    "charAnim": {"anim_name": "AnimName", "anim_group": "anim_group.anim"},
    "trigger": {"trigger_name": "TriggerName"},
}


def create_default_shot(index: int) -> Shot:
    return Shot(
        index=index,
        name=f"Shot {index}",
        next_shot=index + 1,
        skip_shot=index + 1,
        max_time=10.0,
        time=0.0,
    )


def create_default_sync_point(index: int, shot: int) -> SyncPoint:
    """Create a sync point; the first one of a record has type 0, later ones type 1."""
    return SyncPoint(
        index=index,
        name=f"Shot {shot}, Sync {index}",
        type=0 if index == 0 else 1,
        shot=shot,
        from_end=1,
    )


def create_default_action(kind: str, index: int) -> Action:
    """Create an action of the given variant.

    Args:
        kind: Variant tag (camera, dialog, pop, fade, charAnim, objAnim, trigger)
        index: Position the action will take in its record

    Raises:
        KeyError: If ``kind`` is not a known variant
    """
    variant = variant_for_kind(kind)
    params = variant.params_model(**_NEW_ACTION_OVERRIDES.get(kind, {}))
    return Action(index=index, name=f"Action {index}", params=params)


def create_default_properties() -> CinemaProperties:
    return CinemaProperties()


def create_default_camera_path(guid: str) -> CameraPath:
    return CameraPath(guid=guid, keyframes=[Keyframe()])


def create_default_cinema(
    new_guid: Callable[[], str] | None = None,
    name: str = "New Cinema",
) -> Cinema:
    """Create a record with one shot, one sync point and one participant.

    Args:
        new_guid: Identifier generator supplied by the caller; when None the
            fixed template GUID is used
        name: Display name

    Returns:
        New Cinema record
    """
    return Cinema(
        guid=new_guid() if new_guid else DEFAULT_CINEMA_GUID,
        obj_name=name,
        duration=5.0,
        properties=create_default_properties(),
        shots=[create_default_shot(0)],
        sync_points=[create_default_sync_point(0, 0)],
        participants=["ABCABCAB_CABCABC0"],
    )


def reindexed(items: Sequence[M]) -> list[M]:
    """Return copies of ``items`` whose ``index`` equals their position."""
    return [item.model_copy(update={"index": i}) for i, item in enumerate(items)]
