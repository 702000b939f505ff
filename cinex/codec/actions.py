"""
cinex.codec.actions - Action variant table.

Maps each numeric action type code to its variant: the parameter model
and the extra columns appended to the shared action layout. Both the
decoder and the encoder go through this table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from cinex.codec.fields import FieldSpec, extract_fields
from cinex.codec.layouts import ACTION_HEAD_FIELDS, ACTION_TAIL_FIELDS
from cinex.models import (
    Action,
    CameraParams,
    CharAnimParams,
    DialogParams,
    FadeParams,
    ObjAnimParams,
    PopParams,
    TriggerParams,
)

FALLBACK_KIND = "camera"


@dataclass(frozen=True)
class ActionVariant:
    """One entry of the variant table.

    Attributes:
        kind: Variant tag stored in ``Action.params.kind``
        code: Numeric type code written in the ``Type`` column
        label: Human-readable name
        params_model: Pydantic model holding the variant fields
        fields: Variant-specific columns
        leading: Variant columns follow ``Type`` instead of the shared tail
    """

    kind: str
    code: int
    label: str
    params_model: type[BaseModel]
    fields: tuple[FieldSpec, ...]
    leading: bool = False

    @property
    def layout(self) -> tuple[FieldSpec, ...]:
        if self.leading:
            return ACTION_HEAD_FIELDS + self.fields + ACTION_TAIL_FIELDS
        return ACTION_HEAD_FIELDS + ACTION_TAIL_FIELDS + self.fields


ACTION_VARIANTS: tuple[ActionVariant, ...] = (
    ActionVariant(
        kind="charAnim",
        code=2,
        label="Character Animation",
        params_model=CharAnimParams,
        fields=(
            FieldSpec("Character", "g", "character"),
            FieldSpec("AnimName", "s", "anim_name"),
            FieldSpec("Length", "f", "length"),
            FieldSpec("AnimGroup", "s", "anim_group"),
            FieldSpec("AnimatedInPlace", "d", "animated_in_place"),
            FieldSpec("Loops", "d", "loops"),
            FieldSpec("AnimsToPlay", "d", "anims_to_play"),
        ),
    ),
    ActionVariant(
        kind="camera",
        code=4,
        label="Camera",
        params_model=CameraParams,
        fields=(
            FieldSpec("CameraType", "d", "camera_type"),
            FieldSpec("Target", "g", "target"),
            FieldSpec("Relative", "d", "relative"),
            FieldSpec("StartOrient", "fff", "start_orient"),
            FieldSpec("EndOrient", "fff", "end_orient"),
            FieldSpec("StartOffset", "fff", "start_offset"),
            FieldSpec("EndOffset", "fff", "end_offset"),
            FieldSpec("TargetOffset", "fff", "target_offset"),
            FieldSpec("StartFOV", "f", "start_fov"),
            FieldSpec("EndFOV", "f", "end_fov"),
            FieldSpec("TransitionPop", "d", "transition_pop"),
            FieldSpec("Loop", "d", "loop"),
            FieldSpec("EndSyncPoint", "d", "end_sync_point"),
        ),
    ),
    ActionVariant(
        kind="dialog",
        code=5,
        label="Dialog",
        params_model=DialogParams,
        fields=(
            FieldSpec("Speaker", "g", "speaker"),
            FieldSpec("Sample", "s", "sample"),
            FieldSpec("ForceEnd", "d", "force_end"),
            FieldSpec("Positional", "d", "positional"),
        ),
    ),
    ActionVariant(
        kind="pop",
        code=6,
        label="Pop/Teleport",
        params_model=PopParams,
        fields=(
            FieldSpec("Object", "g", "object"),
            FieldSpec("Location", "g", "location"),
            FieldSpec("Facing", "g", "facing"),
            FieldSpec("SetFacing", "d", "set_facing"),
            FieldSpec("Anim", "s", "anim"),
        ),
    ),
    ActionVariant(
        kind="fade",
        code=8,
        label="Fade",
        params_model=FadeParams,
        fields=(
            FieldSpec("FXType", "d", "fx_type"),
            FieldSpec("Magnitude", "f", "magnitude"),
            FieldSpec("Frequency", "f", "frequency"),
            FieldSpec("Rolling", "d", "rolling"),
            FieldSpec("Fadeout", "d", "fadeout"),
            FieldSpec("Color", "dddd", "color"),
            FieldSpec("Target", "f", "target"),
        ),
    ),
    ActionVariant(
        kind="objAnim",
        code=9,
        label="Object Animation",
        params_model=ObjAnimParams,
        fields=(
            FieldSpec("Object", "g", "object"),
            FieldSpec("AnimName", "s", "anim_name"),
            FieldSpec("StartAnimating", "d", "start_animating"),
            FieldSpec("Looping", "d", "looping"),
            FieldSpec("HideWhenDone", "d", "hide_when_done"),
            FieldSpec("SetToEndOnSkip", "d", "set_to_end_on_skip"),
        ),
    ),
    ActionVariant(
        kind="trigger",
        code=10,
        label="Trigger",
        params_model=TriggerParams,
        fields=(FieldSpec("TriggerName", "s", "trigger_name"),),
        leading=True,
    ),
)

_BY_CODE: dict[int, ActionVariant] = {v.code: v for v in ACTION_VARIANTS}
_BY_KIND: dict[str, ActionVariant] = {v.kind: v for v in ACTION_VARIANTS}


def variant_for_code(code: int) -> ActionVariant | None:
    return _BY_CODE.get(code)


def variant_for_kind(kind: str) -> ActionVariant:
    """Look up a variant by its tag.

    Raises:
        KeyError: If the tag is not one of the seven known variants
    """
    return _BY_KIND[kind]


def code_for_kind(kind: str) -> int:
    return variant_for_kind(kind).code


def build_action(values: dict[str, str], prefix: str, index: int) -> tuple[Action, bool]:
    """Build an Action from the bound values of one ``ActionK`` section.

    The ``Type`` column selects the variant. A missing column reads as the
    camera code; an unknown code falls back to a camera action with
    default camera fields.

    Args:
        values: Output of bind_values for the section
        prefix: Section namespace (e.g. ``Action3\\``)
        index: Positional index taken from the section name

    Returns:
        Tuple of (action, whether the type code was recognised)
    """
    raw_code = extract_fields(values, (FieldSpec("Type", "d", "code"),), prefix)
    code = raw_code.get("code", _BY_KIND[FALLBACK_KIND].code)
    variant = variant_for_code(code)
    known = variant is not None

    base = extract_fields(values, ACTION_HEAD_FIELDS + ACTION_TAIL_FIELDS, prefix)
    base.setdefault("name", f"Action {index}")

    if variant is None:
        params: BaseModel = CameraParams()
    else:
        params = variant.params_model(**extract_fields(values, variant.fields, prefix))

    return Action(index=index, params=params, **base), known


def action_row(action: Action) -> tuple[tuple[FieldSpec, ...], dict[str, Any]]:
    """Flatten an Action into its layout and a column-keyed row.

    Args:
        action: Action to encode

    Returns:
        Tuple of (layout for the action's variant, attribute-to-value row)
    """
    variant = variant_for_kind(action.params.kind)
    row = action.model_dump(exclude={"params"})
    row.update(action.params.model_dump(exclude={"kind"}))
    row["type_code"] = variant.code
    return variant.layout, row
