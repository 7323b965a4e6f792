"""Tests for XZ ground-plane helpers."""
from __future__ import annotations

from tick_vec import xz


class TestXZ:
    def test_as_vec2(self) -> None:
        assert xz.as_vec2((1.0, 2.0, 3.0)) == (1.0, 3.0)

    def test_magnitude_ignores_height(self) -> None:
        assert xz.magnitude_sq((3.0, 100.0, 4.0)) == 25.0
        assert xz.magnitude((3.0, 100.0, 4.0)) == 5.0

    def test_scale_keeps_height(self) -> None:
        assert xz.scale((1.0, 7.0, -2.0), 3.0) == (3.0, 7.0, -6.0)

    def test_lerp_keeps_own_height(self) -> None:
        assert xz.lerp((0.0, 5.0, 0.0), (10.0, -5.0, 20.0), 0.5) == (5.0, 5.0, 10.0)

    def test_lerp_endpoints(self) -> None:
        a = (1.0, 2.0, 3.0)
        b = (4.0, 9.0, 6.0)
        assert xz.lerp(a, b, 0.0) == a
        assert xz.lerp(a, b, 1.0) == (4.0, 2.0, 6.0)
