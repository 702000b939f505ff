"""
cinex.codec.layouts - Fixed section layouts of the EXPORT format.

Each layout is the ordered column list of one section kind. Labels are
written without the per-section namespace (``Shot3\\``), which the
encoder and decoder prepend.
"""

from __future__ import annotations

from cinex.codec.fields import FieldSpec

CINEMA_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("GUID", "s", "guid", 18),
    FieldSpec("DoesCameraColl", "d", "does_camera_coll", 16),
    FieldSpec("DoesCameraFade", "d", "does_camera_fade", 16),
    FieldSpec("LightChannels", "d", "light_channels", 15),
    FieldSpec("ObjectFlags", "d", "object_flags", 13),
    FieldSpec("ScriptResource", "s", "script_resource", 16),
    FieldSpec("InitialPos", "fff", "initial_pos", 26),
    FieldSpec("Orientation", "fff", "orientation", 26),
    FieldSpec("LocalBoundingBox", "ffffff", "local_bounding_box", 52),
    FieldSpec("ObjSaveFlag", "d", "obj_save_flag", 13),
    FieldSpec("ObjName", "s", "obj_name", 26),
    FieldSpec("Repeatable", "d", "repeatable", 12),
    FieldSpec("PopAtEnd", "d", "pop_at_end", 10),
    FieldSpec("Cinematic", "d", "cinematic", 11),
    FieldSpec("Time", "f", "time", 8),
    FieldSpec("Duration", "f", "duration", 10),
    FieldSpec("nShots", "d", "n_shots", 8, derived=True),
    FieldSpec("nSyncPoints", "d", "n_sync_points", 13, derived=True),
    FieldSpec("nActions", "d", "n_actions", 10, derived=True),
    FieldSpec("nParticipants", "d", "n_participants", 15, derived=True),
    FieldSpec("InitialShot", "d", "initial_shot", 13),
    FieldSpec("BilboInvisible", "d", "bilbo_invisible", 16),
    FieldSpec("HasIntroTrans", "d", "has_intro_trans", 15),
    FieldSpec("HasOutroTrans", "d", "has_outro_trans", 15),
    FieldSpec("Skippable", "d", "skippable", 11),
    FieldSpec("IsDeathCinema", "d", "is_death_cinema", 15),
    FieldSpec("ForceNoWeapon", "d", "force_no_weapon", 15),
    FieldSpec("ForceUseStick", "d", "force_use_stick", 15),
    FieldSpec("ForceUseSting", "d", "force_use_sting", 15),
    FieldSpec("Letterbox", "d", "letterbox", 11),
    FieldSpec("DisableControl", "d", "disable_control", 16),
    FieldSpec("BypassQueue", "d", "bypass_queue", 13),
    FieldSpec("LowPriority", "d", "low_priority", 13),
    FieldSpec("SubtitleInBox", "d", "subtitle_in_box", 15),
)

# Cinema header columns stored on the record itself rather than its properties
CINEMA_ROOT_ATTRS = ("guid", "obj_name", "duration")

SHOT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Name", "s", "name", 12),
    FieldSpec("NextShot", "d", "next_shot", 16),
    FieldSpec("SkipShot", "d", "skip_shot", 16),
    FieldSpec("MaxTime", "f", "max_time", 14),
    FieldSpec("Time", "f", "time", 12),
)

SYNC_POINT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Name", "s", "name", 17),
    FieldSpec("Type", "d", "type", 17),
    FieldSpec("Action", "d", "action", 19),
    FieldSpec("Offset", "f", "offset", 19),
    FieldSpec("Shot", "d", "shot", 17),
    FieldSpec("FromEnd", "d", "from_end", 20),
    FieldSpec("AbsoluteTimeStart", "f", "absolute_time_start", 23),
)

ACTION_HEAD_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Name", "s", "name"),
    FieldSpec("Type", "d", "type_code", derived=True),
)

ACTION_TAIL_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Shot", "d", "shot"),
    FieldSpec("Offset", "f", "offset"),
    FieldSpec("Duration", "f", "duration"),
    FieldSpec("SyncPoint", "d", "sync_point"),
    FieldSpec("FinishShot", "d", "finish_shot"),
    FieldSpec("DefaultLength", "f", "default_length"),
)

CAMERA_PATH_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("GUID", "s", "guid", 18),
    FieldSpec("Pos", "fff", "pos", 26),
    FieldSpec("Orient", "fff", "orient", 26),
    FieldSpec("Scale", "fff", "scale", 26),
    FieldSpec("BBox", "ffffff", "bbox", 30),
    FieldSpec("Loops", "d", "loops", 7),
    FieldSpec("Range", "fff", "range", 22),
    FieldSpec("Min", "fff", "min", 33),
    FieldSpec("PlaySpeed", "f", "play_speed", 11),
    FieldSpec("CamPosOffset", "fff", "cam_pos_offset", 37),
    FieldSpec("CamRotOffset", "fff", "cam_rot_offset", 26),
    FieldSpec("LookatGuid", "g", "lookat_guid", 17),
    FieldSpec("LookatOffset", "fff", "lookat_offset", 26),
    FieldSpec("FromCenter", "d", "from_center", 12),
    FieldSpec("Interpolate", "d", "interpolate", 13),
    FieldSpec("Lookspring", "d", "lookspring", 12),
)

KEYFRAME_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("PosX", "d", "pos_x", 6),
    FieldSpec("PosY", "d", "pos_y", 6),
    FieldSpec("PosZ", "d", "pos_z", 6),
    FieldSpec("OriX", "d", "ori_x", 6),
    FieldSpec("OriY", "d", "ori_y", 6),
    FieldSpec("OriZ", "d", "ori_z", 6),
    FieldSpec("OriW", "d", "ori_w", 6),
)

# Keyframe sections always announce a count of 1, whatever they hold
KEYFRAMES_HEADER = "[ Keyframes : 1 ]"

PARTICIPANTS_DESCRIPTOR = " { PGuid:g           }"

RECORD_SEPARATOR = "/" * 42

# Constant Action-1/Action-2 sections the engine expects after the
# participants. Values are pre-rendered text and column width, kept exactly
# as the engine's reference exports write them.
BOILERPLATE_SECTIONS = ("Action-1", "Action-2")

BOILERPLATE_COLUMNS: tuple[tuple[str, str, int], ...] = (
    ("Shot:d", "0", 15),
    ("Offset:f", "0.000000", 17),
    ("Duration:f", "1.000000", 19),
    ("SyncPoint:d", "0", 20),
    ("FinishShot:d", "0", 21),
    ("DefaultLength:f", "1.000000", 24),
    ("FXType:d", "3", 17),
    ("Magnitude:f", "0.15", 20),
    ("Frequency:f", "20.000000", 20),
    ("Rolling:d", "0", 18),
    ("Fadeout:d", "0", 18),
    ("Color:dddd", "0 0 0 255", 18),
    ("Target:f", "0.000000", 17),
)
