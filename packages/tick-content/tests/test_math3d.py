"""Tests for 3D value constructors."""
from __future__ import annotations

import math

import pytest
from tick_content.math3d import (
    m_to_p,
    mat3_identity,
    mat3_rotate,
    value_for_unique_id,
    vec3,
)


def test_vec3_floats() -> None:
    assert vec3(1, 2, 3) == (1.0, 2.0, 3.0)


def test_rotate_zero_axis_is_unchanged() -> None:
    assert mat3_rotate(mat3_identity(), 1.5, (0.0, 0.0, 0.0)) == mat3_identity()


def test_rotate_quarter_turn_about_z() -> None:
    rot = mat3_rotate(mat3_identity(), math.pi / 2, (0.0, 0.0, 2.0))
    expected = ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    for row, expected_row in zip(rot, expected):
        assert row == pytest.approx(expected_row, abs=1e-9)


def test_m_to_p() -> None:
    assert m_to_p((2.0, 4.0, 0.0), 2.0) == (1.0, 2.0, 0.0)


def test_value_for_unique_id_deterministic() -> None:
    assert value_for_unique_id(7, 42) == value_for_unique_id(7, 42)
    assert value_for_unique_id(7, 42) != value_for_unique_id(8, 42)


def test_value_for_unique_id_range() -> None:
    for uid in range(50):
        assert 0.0 <= value_for_unique_id(uid, 3) < 1.0
