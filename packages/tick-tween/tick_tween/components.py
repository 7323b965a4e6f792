"""Tween component."""
from __future__ import annotations

from dataclasses import dataclass

from tick_ease import EasingKind, get_easing, lerp


@dataclass
class Tween:
    """Interpolates ``start_val`` -> ``end_val`` over ``duration`` ticks.

    ``easing`` is any name registered in ``tick_ease.EASINGS`` or an
    ``EasingKind``; it is resolved lazily so an unknown name only affects
    the tween that carries it.
    """

    start_val: float
    end_val: float
    duration: int
    elapsed: int = 0
    easing: str | EasingKind = "linear"

    def __post_init__(self) -> None:
        if self.duration < 1:
            raise ValueError(f"duration must be >= 1 tick, got {self.duration}")

    @property
    def progress(self) -> float:
        return min(self.elapsed / self.duration, 1.0)

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration


def tween_value(tween: Tween) -> float:
    """Current interpolated value; exactly ``end_val`` once finished."""
    if tween.finished:
        return tween.end_val
    eased_t = get_easing(tween.easing)(tween.progress)
    return lerp(tween.start_val, tween.end_val, eased_t)
