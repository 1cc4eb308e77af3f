"""Procedural 2D skeleton animation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

Vector = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

WALK_FRAME_COUNT = 30


@dataclass(frozen=True)
class Transform:
    """Translation, rotation (quaternion x, y, z, w) and scale."""

    translation: Vector = (0.0, 0.0, 0.0)
    rotation: Quaternion = (0.0, 0.0, 0.0, 1.0)
    scale: Vector = (1.0, 1.0, 1.0)


@dataclass
class Bone:
    """A bone with a transform relative to its parent bone."""

    name: str = ""
    parent_name: str = ""
    transform: Transform = field(default_factory=Transform)


@dataclass
class Skeleton:
    """A 2D skeleton made of bones."""

    bones: list[Bone] = field(default_factory=list)


def generate_walk_animation(
    skeleton: Skeleton, speed: float = 1.0, amplitude: float = 10.0
) -> list[Transform]:
    """Sway every bone sideways on a sine wave over a fixed number of frames.

    The result is frame-major: for each frame, one transform per bone in order.
    """
    frames: list[Transform] = []
    if not skeleton.bones:
        return frames
    for frame in range(WALK_FRAME_COUNT):
        time = frame / WALK_FRAME_COUNT
        offset = math.sin(time * 2.0 * math.pi * speed) * amplitude
        for bone in skeleton.bones:
            x, y, z = bone.transform.translation
            frames.append(replace(bone.transform, translation=(x, y + offset, z)))
    return frames