"""tick-ease - Closed-form easing curves: 9 families x In/Out/InOut."""
from __future__ import annotations

from tick_ease.config import SampleConfig
from tick_ease.kinds import (
    EasingFamily,
    EasingKind,
    EasingMode,
    UnknownEasingError,
    kinds_for,
)
from tick_ease.mathf import (
    BOUNDARY_TOLERANCE,
    EQUAL_APPROX_TOLERANCE,
    is_equal_approx,
    is_one_approx,
    is_zero_approx,
    lerp,
)
from tick_ease.sampling import sample
from tick_ease.table import EASINGS, ease, get_easing, linear

__all__ = [
    "BOUNDARY_TOLERANCE",
    "EASINGS",
    "EQUAL_APPROX_TOLERANCE",
    "EasingFamily",
    "EasingKind",
    "EasingMode",
    "SampleConfig",
    "UnknownEasingError",
    "ease",
    "get_easing",
    "is_equal_approx",
    "is_one_approx",
    "is_zero_approx",
    "kinds_for",
    "lerp",
    "linear",
    "sample",
]
