"""Tests for tuple vector math helpers."""
from __future__ import annotations

import math

import pytest

from tick_vec import vec


class TestArithmetic:
    def test_add(self) -> None:
        assert vec.add((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == (5.0, 7.0, 9.0)

    def test_sub(self) -> None:
        assert vec.sub((5.0, 3.0), (1.0, 2.0)) == (4.0, 1.0)

    def test_scale(self) -> None:
        assert vec.scale((1.0, -2.0), -1.0) == (-1.0, 2.0)

    def test_mismatched_dimensions_raises(self) -> None:
        with pytest.raises(ValueError):
            vec.add((1.0, 2.0), (3.0, 4.0, 5.0))


class TestProducts:
    def test_dot(self) -> None:
        assert vec.dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == 32.0

    def test_cross_right_handed(self) -> None:
        assert vec.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)

    def test_cross_up_forward(self) -> None:
        assert vec.cross((0.0, 1.0, 0.0), (1.0, 0.0, 0.0)) == (0.0, 0.0, -1.0)

    def test_cross_needs_3d(self) -> None:
        with pytest.raises(ValueError):
            vec.cross((1.0, 0.0), (0.0, 1.0))  # type: ignore[arg-type]


class TestMagnitude:
    def test_3_4_5(self) -> None:
        assert vec.magnitude((3.0, 4.0)) == 5.0
        assert vec.magnitude_sq((3.0, 4.0)) == 25.0

    def test_normalize(self) -> None:
        result = vec.normalize((1.0, 2.0, 2.0))
        assert math.isclose(vec.magnitude(result), 1.0)

    def test_normalize_zero_unchanged(self) -> None:
        assert vec.normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


class TestLerp:
    def test_endpoints(self) -> None:
        assert vec.lerp((0.0, 10.0), (10.0, 20.0), 0.0) == (0.0, 10.0)
        assert vec.lerp((0.0, 10.0), (10.0, 20.0), 1.0) == (10.0, 20.0)

    def test_midpoint(self) -> None:
        assert vec.lerp((0.0, 10.0, -4.0), (10.0, 20.0, 4.0), 0.5) == (5.0, 15.0, 0.0)
