"""Tests for SampleConfig and curve sampling."""
from __future__ import annotations

import pytest

from tick_ease import EasingKind, SampleConfig, UnknownEasingError, sample


class TestSampleConfig:
    def test_defaults(self) -> None:
        c = SampleConfig()
        assert c.samples == 10
        assert c.start == 0.0
        assert c.end == 1.0
        assert c.precision == 6

    def test_frozen(self) -> None:
        c = SampleConfig()
        with pytest.raises(AttributeError):
            c.samples = 3  # type: ignore[misc]

    def test_rejects_zero_samples(self) -> None:
        with pytest.raises(ValueError):
            SampleConfig(samples=0)

    def test_rejects_negative_precision(self) -> None:
        with pytest.raises(ValueError):
            SampleConfig(precision=-1)


class TestSample:
    def test_point_count_and_endpoints(self) -> None:
        points = sample(EasingKind.QUADRATIC_IN, SampleConfig(samples=4))
        assert len(points) == 5
        assert points[0] == (0.0, 0.0)
        assert points[-1] == (1.0, 1.0)

    def test_values(self) -> None:
        points = sample("quadratic_in", SampleConfig(samples=4))
        assert points == [
            (0.0, 0.0),
            (0.25, 0.0625),
            (0.5, 0.25),
            (0.75, 0.5625),
            (1.0, 1.0),
        ]

    def test_rounding(self) -> None:
        points = sample(EasingKind.SINE_OUT, SampleConfig(samples=2, precision=3))
        assert points[1] == (0.5, 0.707)

    def test_custom_range(self) -> None:
        points = sample("linear", SampleConfig(samples=2, start=-1.0, end=1.0))
        assert points == [(-1.0, -1.0), (0.0, 0.0), (1.0, 1.0)]

    def test_default_config(self) -> None:
        assert len(sample(EasingKind.BACK_OUT)) == 11

    def test_unknown(self) -> None:
        with pytest.raises(UnknownEasingError):
            sample("nope")
