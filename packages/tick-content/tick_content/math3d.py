"""3D value constructors operating on plain float tuples."""
from __future__ import annotations

import math
import random

from tick_content.types import Mat3, Vec3


def vec3(x: float, y: float, z: float) -> Vec3:
    return (float(x), float(y), float(z))


def scale(v: Vec3, s: float) -> Vec3:
    return (v[0] * s, v[1] * s, v[2] * s)


def magnitude(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def mat3_identity() -> Mat3:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def mat3_mul(a: Mat3, b: Mat3) -> Mat3:
    rows = []
    for i in range(3):
        rows.append(tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3)))
    return tuple(rows)  # type: ignore[return-value]


def mat3_rotate(m: Mat3, angle: float, axis: Vec3) -> Mat3:
    """Rotate *m* by *angle* radians around *axis*.

    A zero-length axis leaves *m* unchanged.
    """
    mag = magnitude(axis)
    if mag == 0.0:
        return m
    x, y, z = scale(axis, 1.0 / mag)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    rot: Mat3 = (
        (t * x * x + c, t * x * y - s * z, t * x * z + s * y),
        (t * x * y + s * z, t * y * y + c, t * y * z - s * x),
        (t * x * z - s * y, t * y * z + s * x, t * z * z + c),
    )
    return mat3_mul(m, rot)


def m_to_p(v: Vec3, world_scale: float) -> Vec3:
    """Convert a metre offset into engine position units."""
    return scale(v, 1.0 / world_scale)


def value_for_unique_id(unique_id: int, seed: int) -> float:
    """Deterministic value in [0, 1) for an object instance and seed."""
    return random.Random(unique_id * 1_000_003 + seed).random()
