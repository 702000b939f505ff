"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cinex.models import (
    Action,
    CameraParams,
    CameraPath,
    CharAnimParams,
    Cinema,
    CinemaProperties,
    DialogParams,
    FadeParams,
    Keyframe,
    ObjAnimParams,
    PopParams,
    Shot,
    SyncPoint,
    TriggerParams,
)

SAMPLE_EXPORT = r"""// Bridge ambush cutscene
[ Cinema : 1 ]
 { GUID:s DoesCameraColl:d DoesCameraFade:d LightChannels:d ObjectFlags:d ScriptResource:s InitialPos:fff Orientation:fff LocalBoundingBox:ffffff ObjSaveFlag:d ObjName:s Repeatable:d PopAtEnd:d Cinematic:d Time:f Duration:f nShots:d nSyncPoints:d nActions:d nParticipants:d InitialShot:d BilboInvisible:d HasIntroTrans:d HasOutroTrans:d Skippable:d IsDeathCinema:d ForceNoWeapon:d ForceUseStick:d ForceUseSting:d Letterbox:d DisableControl:d BypassQueue:d LowPriority:d SubtitleInBox:d }
   "CA3DDD8F_11110000" 1 0 1 432 "scripts/bridge.lua" 10.00 2.00 -3.50 0.00 1.57 0.00 -5.00 -5.00 -5.00 5.00 5.00 5.00 1 "Bridge Ambush" 1 0 1 0.00 12.50 2 2 3 2 0 0 1 0 1 0 0 0 0 1 0 0 0 0
[ Shot0 : 1 ]
 { Shot0\Name:s Shot0\NextShot:d Shot0\SkipShot:d Shot0\MaxTime:f Shot0\Time:f }
   "Opening"    1                1                6.50           0.00
[ Shot1 : 1 ]
 { Shot1\Name:s Shot1\NextShot:d Shot1\SkipShot:d Shot1\MaxTime:f Shot1\Time:f }
   "Standoff"   2                2                6.00           6.50

[ SyncPoint0 : 1 ]
 { SyncPoint0\Name:s SyncPoint0\Type:d SyncPoint0\Action:d SyncPoint0\Offset:f SyncPoint0\Shot:d SyncPoint0\FromEnd:d SyncPoint0\AbsoluteTimeStart:f }
   "Shot 0, Sync 0"  0                 0                   0.00                0                 1                    0.00
[ SyncPoint1 : 1 ]
 { SyncPoint1\Name:s SyncPoint1\Type:d SyncPoint1\Action:d SyncPoint1\Offset:f SyncPoint1\Shot:d SyncPoint1\FromEnd:d SyncPoint1\AbsoluteTimeStart:f }
   "Shot 1, Sync 1"  1                 0                   1.25                1                 0                    7.75


[ Action0 : 1 ]
 { Action0\Name:s Action0\Type:d Action0\Shot:d Action0\Offset:f Action0\Duration:f Action0\SyncPoint:d Action0\FinishShot:d Action0\DefaultLength:f Action0\CameraType:d Action0\Target:g  Action0\Relative:d Action0\StartOrient:fff    Action0\EndOrient:fff      Action0\StartOffset:fff    Action0\EndOffset:fff      Action0\TargetOffset:fff   Action0\StartFOV:f Action0\EndFOV:f Action0\TransitionPop:d Action0\Loop:d Action0\EndSyncPoint:d }
   "Pan In"    4              0              0.00         6.50               0                   1                    6.50                2                    CA3DDD8F_11110001 1                  0.00 0.10 0.00 0.00 -0.10 0.00 0.00 2.00 -8.00 0.00 1.50 -4.00 0.00 1.00 0.00 1.256637           0.90         0                       0              1
[ Action1 : 1 ]
 { Action1\Name:s  Action1\Type:d Action1\Shot:d Action1\Offset:f Action1\Duration:f Action1\SyncPoint:d Action1\FinishShot:d Action1\DefaultLength:f Action1\Speaker:g Action1\Sample:s Action1\ForceEnd:d Action1\Positional:d }
   "Warning"  5              1              0.50         3.00               1                   0                    3.00                ABCABCAB_CABCABC0 "Hold it right there, friend."     1                  0
[ Action2 : 1 ]
 { Action2\Name:s Action2\Type:d Action2\TriggerName:s Action2\Shot:d Action2\Offset:f Action2\Duration:f Action2\SyncPoint:d Action2\FinishShot:d Action2\DefaultLength:f }
   "Spawn Guards"   10              "spawn_guards"       1               2.00         1.00            1                    0                     1.00

[ Participants : 2 ]
 { PGuid:g           }
   ABCABCAB_CABCABC0 
   CA3DDD8F_22220000 
[ Action-1 : 1 ]
 { Action-1\Shot:d Action-1\Offset:f Action-1\Duration:f Action-1\SyncPoint:d Action-1\FinishShot:d Action-1\DefaultLength:f Action-1\FXType:d Action-1\Magnitude:f Action-1\Frequency:f Action-1\Rolling:d Action-1\Fadeout:d Action-1\Color:dddd Action-1\Target:f }
   0 0.000000 1.000000 0 0 1.000000 3 0.15 20.000000 0 0 0 0 0 255 0.000000
[ Action-2 : 1 ]
 { Action-2\Shot:d Action-2\Offset:f Action-2\Duration:f Action-2\SyncPoint:d Action-2\FinishShot:d Action-2\DefaultLength:f Action-2\FXType:d Action-2\Magnitude:f Action-2\Frequency:f Action-2\Rolling:d Action-2\Fadeout:d Action-2\Color:dddd Action-2\Target:f }
   0 0.000000 1.000000 0 0 1.000000 3 0.15 20.000000 0 0 0 0 0 255 0.000000

[ CameraPath : 1 ]
 { GUID:s Pos:fff Orient:fff Scale:fff BBox:ffffff Loops:d Range:fff Min:fff PlaySpeed:f CamPosOffset:fff CamRotOffset:fff LookatGuid:g LookatOffset:fff FromCenter:d Interpolate:d Lookspring:d }
   "CA3DDD8F_11110001" 0.00 0.00 0.00 0.00 0.00 0.00 1.00 1.00 1.00 -10.00 -10.00 0.00 10.00 10.00 5.00 2 20.00 20.00 10.00 -10.00 -10.00 0.00 1.00 0.00 0.00 0.00 0.00 0.00 0.00 ABCABCAB_CABCABC0 0.00 1.50 0.00 0 1 0
[ Keyframes : 1 ]
 { PosX:d PosY:d PosZ:d OriX:d OriY:d OriZ:d OriW:d }
   -32766 -32766 0      0      0      0      32766
   0      0      16383  0      0      0      32766
   32766  32766  32766  0      0      0      32766
"""


def make_keyframes(count: int, start: int = 0) -> list[Keyframe]:
    return [
        Keyframe(
            pos_x=start + i * 100,
            pos_y=-(start + i * 50),
            pos_z=i,
            ori_x=0,
            ori_y=0,
            ori_z=-i,
            ori_w=32766,
        )
        for i in range(count)
    ]


@pytest.fixture
def sample_export_text() -> str:
    """Return a hand-written single-record EXPORT document."""
    return SAMPLE_EXPORT


@pytest.fixture
def sample_export_file(tmp_path: Path) -> Path:
    """Write the sample EXPORT document to a temporary file."""
    path = tmp_path / "Bridge_Ambush.EXPORT.TXT"
    path.write_text(SAMPLE_EXPORT, encoding="utf-8")
    return path


@pytest.fixture
def full_cinema() -> Cinema:
    """Return a record using every action variant and two camera paths."""
    base = {"shot": 0, "offset": 0.25, "duration": 2.0, "sync_point": 0}
    return Cinema(
        guid="CA3DDD8F_33330000",
        obj_name="Harbor Escape",
        duration=21.75,
        properties=CinemaProperties(
            does_camera_coll=0,
            script_resource="scripts/harbor.lua",
            initial_pos=(12.5, -3.25, 100.0),
            orientation=(0.0, 3.141593, 0.0),
            local_bounding_box=(-2.0, -2.0, -1.0, 2.0, 2.0, 1.0),
            time=1.5,
            letterbox=0,
            subtitle_in_box=1,
        ),
        shots=[
            Shot(index=0, name="Dock", next_shot=1, skip_shot=2, max_time=8.0, time=0.0),
            Shot(index=1, name="Chase", next_shot=2, skip_shot=2, max_time=9.5, time=8.0),
            Shot(index=2, name="Leap", next_shot=3, skip_shot=3, max_time=4.25, time=17.5),
        ],
        sync_points=[
            SyncPoint(index=0, name="Shot 0, Sync 0", type=0, shot=0, from_end=1),
            SyncPoint(
                index=1,
                name="Shot 1, Sync 1",
                type=1,
                action=2,
                offset=0.75,
                shot=1,
                from_end=0,
                absolute_time_start=8.75,
            ),
        ],
        actions=[
            Action(
                index=0,
                name="Run Cycle",
                params=CharAnimParams(
                    character="CA3DDD8F_44440000",
                    anim_name="run_fast",
                    length=1.333333,
                    anim_group="hero_moves.anim",
                    loops=3,
                    anims_to_play=2,
                ),
                **base,
            ),
            Action(
                index=1,
                name="Track Hero",
                finish_shot=0,
                params=CameraParams(
                    camera_type=1,
                    target="CA3DDD8F_44440000",
                    relative=1,
                    start_orient=(0.0, 0.5, 0.0),
                    end_orient=(0.1, -0.5, 0.0),
                    start_offset=(0.0, 2.0, -6.0),
                    end_offset=(1.0, 2.5, -3.0),
                    target_offset=(0.0, 1.2, 0.0),
                    start_fov=1.256637,
                    end_fov=0.785398,
                    loop=1,
                    end_sync_point=1,
                ),
                **base,
            ),
            Action(
                index=2,
                name="Shout",
                params=DialogParams(
                    speaker="CA3DDD8F_44440000",
                    sample="Hello there, friend",
                    force_end=0,
                    positional=1,
                ),
                **base,
            ),
            Action(
                index=3,
                name="Teleport",
                params=PopParams(
                    object="CA3DDD8F_44440000",
                    location="CA3DDD8F_55550000",
                    facing="CA3DDD8F_55550001",
                    set_facing=0,
                    anim="land",
                ),
                **base,
            ),
            Action(
                index=4,
                name="Flash",
                default_length=0.5,
                params=FadeParams(
                    fx_type=3,
                    magnitude=0.35,
                    frequency=12.5,
                    rolling=1,
                    fadeout=1,
                    color=(255, 128, 0, 200),
                    target=0.8,
                ),
                **base,
            ),
            Action(
                index=5,
                name="Open Gate",
                params=ObjAnimParams(
                    object="CA3DDD8F_66660000",
                    anim_name="gate_open",
                    looping=1,
                    hide_when_done=0,
                ),
                **base,
            ),
            Action(
                index=6,
                name="Start Music",
                params=TriggerParams(trigger_name="music_chase"),
                **base,
            ),
        ],
        participants=["CA3DDD8F_44440000", "ABCABCAB_CABCABC0"],
        camera_paths=[
            CameraPath(
                guid="CA3DDD8F_11110001",
                pos=(1.0, 2.0, 3.0),
                bbox=(-50.0, -50.0, 0.0, 50.0, 50.0, 20.0),
                loops=0,
                range=(100.0, 100.0, 20.0),
                min=(-50.0, -50.0, 0.0),
                play_speed=0.75,
                lookat_guid="CA3DDD8F_44440000",
                lookat_offset=(0.0, 1.5, 0.0),
                keyframes=make_keyframes(3),
            ),
            CameraPath(
                guid="CA3DDD8F_11110002",
                scale=(2.0, 2.0, 2.0),
                range=(10.0, 10.0, 10.0),
                min=(0.0, 0.0, 0.0),
                from_center=1,
                interpolate=0,
                lookspring=1,
                keyframes=make_keyframes(5, start=1000),
            ),
        ],
    )
