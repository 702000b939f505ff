"""
cinex.models - Record graph for cinema (cutscene) data.

Pydantic models for the root Cinema record and its shots, sync points,
actions, participants and camera paths. Field defaults are the values the
EXPORT reader falls back to when a field is missing from the text.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError

from cinex.exceptions import InterchangeError

Vec3 = tuple[float, float, float]
Box6 = tuple[float, float, float, float, float, float]
Color4 = tuple[int, int, int, int]

NULL_GUID = "00000000_00000000"
PLACEHOLDER_GUID = "ABCABCAB_CABCABC0"
DEFAULT_FOV = 1.256637

ZERO3: Vec3 = (0.0, 0.0, 0.0)

# Identifiers are written unquoted, one token each.
_IDENTIFIER_RE = re.compile(r'^[^\s\[{/"][^\s"]*$')


def is_identifier(value: str) -> bool:
    """Check that a value can be written as an unquoted identifier token."""
    return _IDENTIFIER_RE.match(value) is not None


def _check_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValueError(
            f"{value!r} is not a valid identifier: it must be non-empty, without "
            "whitespace or double quotes, and must not start with [, { or /"
        )
    return value


Identifier = Annotated[str, AfterValidator(_check_identifier)]


class RecordModel(BaseModel):
    """Base for record models; floats must be finite to have a text form."""

    model_config = ConfigDict(allow_inf_nan=False)


class CinemaProperties(RecordModel):
    """Flat property bag carried on the Cinema header line."""

    does_camera_coll: int = 1
    does_camera_fade: int = 1
    light_channels: int = 1
    object_flags: int = 432
    script_resource: str = ""
    initial_pos: Vec3 = ZERO3
    orientation: Vec3 = ZERO3
    local_bounding_box: Box6 = (-1.0, -1.0, -1.0, 1.0, 1.0, 1.0)
    obj_save_flag: int = 1
    repeatable: int = 1
    pop_at_end: int = 0
    cinematic: int = 1
    time: float = 0.0
    initial_shot: int = 0
    bilbo_invisible: int = 0
    has_intro_trans: int = 0
    has_outro_trans: int = 0
    skippable: int = 1
    is_death_cinema: int = 0
    force_no_weapon: int = 0
    force_use_stick: int = 0
    force_use_sting: int = 0
    letterbox: int = 1
    disable_control: int = 0
    bypass_queue: int = 0
    low_priority: int = 0
    subtitle_in_box: int = 0


class Shot(RecordModel):
    """A scene segment with timing and branch indices."""

    index: int = 0
    name: str = ""
    next_shot: int = 0
    skip_shot: int = 0
    max_time: float = 10.0
    time: float = 0.0


class SyncPoint(RecordModel):
    """A named timing marker inside a shot."""

    index: int = 0
    name: str = ""
    type: int = 0
    action: int = 0
    offset: float = 0.0
    shot: int = 0
    from_end: int = 1
    absolute_time_start: float = 0.0


class CharAnimParams(RecordModel):
    kind: Literal["charAnim"] = "charAnim"
    character: Identifier = NULL_GUID
    anim_name: str = ""
    length: float = 1.0
    anim_group: str = ""
    animated_in_place: int = 1
    loops: int = 0
    anims_to_play: int = 0


class CameraParams(RecordModel):
    kind: Literal["camera"] = "camera"
    camera_type: int = 0
    target: Identifier = NULL_GUID
    relative: int = 0
    start_orient: Vec3 = ZERO3
    end_orient: Vec3 = ZERO3
    start_offset: Vec3 = ZERO3
    end_offset: Vec3 = ZERO3
    target_offset: Vec3 = ZERO3
    start_fov: float = DEFAULT_FOV
    end_fov: float = DEFAULT_FOV
    transition_pop: int = 0
    loop: int = 0
    end_sync_point: int = 0


class DialogParams(RecordModel):
    kind: Literal["dialog"] = "dialog"
    speaker: Identifier = PLACEHOLDER_GUID
    sample: str = ""
    force_end: int = 1
    positional: int = 0


class PopParams(RecordModel):
    kind: Literal["pop"] = "pop"
    object: Identifier = PLACEHOLDER_GUID
    location: Identifier = NULL_GUID
    facing: Identifier = NULL_GUID
    set_facing: int = 1
    anim: str = ""


class FadeParams(RecordModel):
    kind: Literal["fade"] = "fade"
    fx_type: int = 1
    magnitude: float = 0.15
    frequency: float = 20.0
    rolling: int = 0
    fadeout: int = 0
    color: Color4 = (0, 0, 0, 255)
    target: float = 0.0


class ObjAnimParams(RecordModel):
    kind: Literal["objAnim"] = "objAnim"
    object: Identifier = NULL_GUID
    anim_name: str = ""
    start_animating: int = 1
    looping: int = 0
    hide_when_done: int = 1
    set_to_end_on_skip: int = 1


class TriggerParams(RecordModel):
    kind: Literal["trigger"] = "trigger"
    trigger_name: str = ""


ActionParams = Annotated[
    Union[
        CharAnimParams,
        CameraParams,
        DialogParams,
        PopParams,
        FadeParams,
        ObjAnimParams,
        TriggerParams,
    ],
    Field(discriminator="kind"),
]

ActionKind = Literal["charAnim", "camera", "dialog", "pop", "fade", "objAnim", "trigger"]


class Action(RecordModel):
    """A typed, time-scoped instruction bound to a shot and sync point.

    The shared base fields live on the action itself; variant-specific
    fields live in ``params``, discriminated by ``params.kind``.
    """

    index: int = 0
    name: str = ""
    shot: int = 0
    offset: float = 0.0
    duration: float = 1.0
    sync_point: int = 0
    finish_shot: int = 1
    default_length: float = 1.0
    params: ActionParams = Field(default_factory=CameraParams)

    @property
    def kind(self) -> str:
        return self.params.kind


class Keyframe(RecordModel):
    """One sampled camera pose; each component is a raw value in [-32766, 32766]."""

    pos_x: int = 0
    pos_y: int = 0
    pos_z: int = 0
    ori_x: int = 0
    ori_y: int = 0
    ori_z: int = 0
    ori_w: int = 0

    def as_row(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self.pos_x,
            self.pos_y,
            self.pos_z,
            self.ori_x,
            self.ori_y,
            self.ori_z,
            self.ori_w,
        )


class CameraPath(RecordModel):
    """A keyframed camera curve with its local normalization box."""

    guid: str = ""
    pos: Vec3 = ZERO3
    orient: Vec3 = ZERO3
    scale: Vec3 = (1.0, 1.0, 1.0)
    bbox: Box6 = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    loops: int = 1
    range: Vec3 = ZERO3
    min: Vec3 = ZERO3
    play_speed: float = 1.0
    cam_pos_offset: Vec3 = ZERO3
    cam_rot_offset: Vec3 = ZERO3
    lookat_guid: Identifier = PLACEHOLDER_GUID
    lookat_offset: Vec3 = ZERO3
    from_center: int = 0
    interpolate: int = 1
    lookspring: int = 0
    keyframes: list[Keyframe] = Field(default_factory=list)


class Cinema(RecordModel):
    """Root cutscene record."""

    guid: str = ""
    obj_name: str = ""
    duration: float = 0.0
    properties: CinemaProperties = Field(default_factory=CinemaProperties)
    shots: list[Shot] = Field(default_factory=list)
    sync_points: list[SyncPoint] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    participants: list[Identifier] = Field(default_factory=list)
    camera_paths: list[CameraPath] = Field(default_factory=list)


def cinemas_to_dict(cinemas: list[Cinema]) -> dict[str, Any]:
    """Convert records to the JSON interchange form."""
    return {"cinemas": [c.model_dump(mode="json") for c in cinemas]}


def cinemas_from_dict(data: dict[str, Any]) -> list[Cinema]:
    """Build records from the JSON interchange form.

    Raises:
        InterchangeError: If the data is not a ``{"cinemas": [...]}`` mapping
            of valid records
    """
    if not isinstance(data, dict) or not isinstance(data.get("cinemas"), list):
        raise InterchangeError("Expected an object with a 'cinemas' list")
    try:
        return [Cinema.model_validate(item) for item in data["cinemas"]]
    except ValidationError as e:
        raise InterchangeError(f"Invalid cinema data: {e}") from e
