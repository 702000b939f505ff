"""Tests for cinex.models module and the JSON interchange form."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from cinex.exceptions import InterchangeError
from cinex.models import (
    Action,
    CameraParams,
    CameraPath,
    CharAnimParams,
    Cinema,
    DialogParams,
    ObjAnimParams,
    PopParams,
    Shot,
    is_identifier,
    cinemas_from_dict,
    cinemas_to_dict,
)


class TestAction:
    def test_default_is_camera(self) -> None:
        action = Action()
        assert action.kind == "camera"
        assert isinstance(action.params, CameraParams)

    def test_params_discriminated_by_kind(self) -> None:
        action = Action.model_validate({"name": "Talk", "params": {"kind": "dialog", "sample": "Hi"}})
        assert isinstance(action.params, DialogParams)
        assert action.params.sample == "Hi"

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Action.model_validate({"params": {"kind": "explosion"}})


class TestIdentifiers:
    @pytest.mark.parametrize(
        "value", ["CA3DDD8F_11110000", "ABCABCAB_CABCABC0", "x", "A/B", "a[b]"]
    )
    def test_valid(self, value: str) -> None:
        assert is_identifier(value)

    @pytest.mark.parametrize(
        "value", ["", "two words", "tab\there", "[x", "{x", "//x", "/x", '"quoted"', "a\u2028b"]
    )
    def test_invalid(self, value: str) -> None:
        assert not is_identifier(value)

    def test_participants_validated(self) -> None:
        with pytest.raises(ValidationError):
            Cinema(participants=["", "ABCABCAB_CABCABC0"])
        with pytest.raises(ValidationError):
            Cinema(participants=["//comment"])

    @pytest.mark.parametrize(
        ("model", "field"),
        [
            (CharAnimParams, "character"),
            (CameraParams, "target"),
            (DialogParams, "speaker"),
            (PopParams, "object"),
            (PopParams, "location"),
            (PopParams, "facing"),
            (ObjAnimParams, "object"),
            (CameraPath, "lookat_guid"),
        ],
    )
    def test_identifier_fields_validated(self, model: type, field: str) -> None:
        with pytest.raises(ValidationError):
            model(**{field: "has space"})
        assert getattr(model(**{field: "CA3DDD8F_00000001"}), field) == "CA3DDD8F_00000001"

    def test_defaults_are_valid(self) -> None:
        assert is_identifier(CameraParams().target)
        assert is_identifier(DialogParams().speaker)
        assert is_identifier(CameraPath().lookat_guid)


class TestFiniteFloats:
    def test_infinite_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Cinema(duration=float("inf"))

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Shot(max_time=float("nan"))

    def test_vector_components_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CameraPath(pos=(0.0, float("-inf"), 0.0))

    def test_params_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CameraParams(start_fov=float("nan"))


class TestInterchange:
    def test_round_trip_through_json(self, full_cinema: Cinema) -> None:
        data = json.loads(json.dumps(cinemas_to_dict([full_cinema])))
        assert cinemas_from_dict(data) == [full_cinema]

    def test_shape(self, full_cinema: Cinema) -> None:
        data = cinemas_to_dict([full_cinema])
        record = data["cinemas"][0]
        assert record["obj_name"] == "Harbor Escape"
        assert record["actions"][2]["params"]["kind"] == "dialog"
        assert record["camera_paths"][0]["keyframes"][0]["ori_w"] == 32766

    def test_missing_fields_use_defaults(self) -> None:
        (cinema,) = cinemas_from_dict({"cinemas": [{"obj_name": "Sparse"}]})
        assert cinema.obj_name == "Sparse"
        assert cinema.properties.object_flags == 432

    def test_wrong_shape_raises(self) -> None:
        with pytest.raises(InterchangeError):
            cinemas_from_dict({"records": []})
        with pytest.raises(InterchangeError):
            cinemas_from_dict([])

    def test_invalid_record_raises(self) -> None:
        with pytest.raises(InterchangeError, match="Invalid cinema data"):
            cinemas_from_dict({"cinemas": [{"duration": "long"}]})

    def test_invalid_identifier_raises(self) -> None:
        with pytest.raises(InterchangeError, match="Invalid cinema data"):
            cinemas_from_dict({"cinemas": [{"participants": ["two words"]}]})
