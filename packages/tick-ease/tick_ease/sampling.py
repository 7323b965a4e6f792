"""Evaluate an easing curve at evenly spaced progress values."""
from __future__ import annotations

from tick_ease.config import SampleConfig
from tick_ease.kinds import EasingKind
from tick_ease.mathf import lerp
from tick_ease.table import get_easing


def sample(
    easing: EasingKind | str,
    config: SampleConfig | None = None,
) -> list[tuple[float, float]]:
    if config is None:
        config = SampleConfig()
    fn = get_easing(easing)
    points = []
    for i in range(config.samples + 1):
        x = lerp(config.start, config.end, i / config.samples)
        points.append((round(x, config.precision), round(fn(x), config.precision)))
    return points
