"""
cinex.keyframes - Keyframe normalization helpers.

Keyframe components are stored as integers in [-32766, 32766]. Divided by
32766 they give a normalized value in [-1, 1], which the owning camera
path maps into world space as ``normalized * range + min``.
"""

from __future__ import annotations

from cinex.models import CameraPath, Keyframe, Vec3

KEYFRAME_SCALE = 32766


def normalize(value: int) -> float:
    return value / KEYFRAME_SCALE


def denormalize(value: float) -> int:
    """Convert a normalized value to a raw keyframe integer, clamped to [-1, 1]."""
    clamped = max(-1.0, min(1.0, value))
    return round(clamped * KEYFRAME_SCALE)


def keyframe_to_world(keyframe: Keyframe, path: CameraPath) -> Vec3:
    """World-space position of a keyframe on its camera path."""
    raw = (keyframe.pos_x, keyframe.pos_y, keyframe.pos_z)
    return tuple(
        normalize(value) * extent + origin
        for value, extent, origin in zip(raw, path.range, path.min)
    )


def world_to_keyframe(point: Vec3, path: CameraPath) -> Keyframe:
    """Keyframe at a world-space position, with zero orientation.

    Axes whose range is zero map to 0.
    """
    raw = [
        denormalize((value - origin) / extent) if extent else 0
        for value, extent, origin in zip(point, path.range, path.min)
    ]
    return Keyframe(pos_x=raw[0], pos_y=raw[1], pos_z=raw[2])


def path_world_extent(path: CameraPath) -> tuple[Vec3, Vec3] | None:
    """Axis-aligned world-space bounds of a path's keyframes.

    Returns:
        (lowest corner, highest corner), or None for a path without keyframes
    """
    if not path.keyframes:
        return None
    points = [keyframe_to_world(kf, path) for kf in path.keyframes]
    low = tuple(min(p[axis] for p in points) for axis in range(3))
    high = tuple(max(p[axis] for p in points) for axis in range(3))
    return low, high
