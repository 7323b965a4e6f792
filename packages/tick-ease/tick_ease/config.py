"""Sampling configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleConfig:
    """Immutable settings for sampling an easing curve.

    Attributes:
        samples: Number of intervals; ``samples + 1`` points are produced.
        start: Progress value of the first point.
        end: Progress value of the last point.
        precision: Decimal digits kept when rounding ``x`` and ``y``.
    """

    samples: int = 10
    start: float = 0.0
    end: float = 1.0
    precision: int = 6

    def __post_init__(self) -> None:
        if self.samples < 1:
            raise ValueError(f"samples must be >= 1, got {self.samples}")
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
