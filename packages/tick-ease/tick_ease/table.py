"""Easing lookup: family -> (in, out, in_out) and the name registry."""
from __future__ import annotations

import logging
from typing import Callable

from tick_ease import curves
from tick_ease.kinds import (
    EasingFamily,
    EasingKind,
    EasingMode,
    UnknownEasingError,
    normalize_name,
)

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]

_MODE_INDEX = {EasingMode.IN: 0, EasingMode.OUT: 1, EasingMode.IN_OUT: 2}

FAMILIES: dict[EasingFamily, tuple[EasingFn, EasingFn, EasingFn]] = {
    EasingFamily.SINE: (curves.sine_in, curves.sine_out, curves.sine_in_out),
    EasingFamily.QUADRATIC: (
        curves.quadratic_in,
        curves.quadratic_out,
        curves.quadratic_in_out,
    ),
    EasingFamily.CUBIC: (curves.cubic_in, curves.cubic_out, curves.cubic_in_out),
    EasingFamily.QUARTIC: (curves.quartic_in, curves.quartic_out, curves.quartic_in_out),
    EasingFamily.QUINTIC: (curves.quintic_in, curves.quintic_out, curves.quintic_in_out),
    EasingFamily.EXPONENTIAL: (
        curves.exponential_in,
        curves.exponential_out,
        curves.exponential_in_out,
    ),
    EasingFamily.CIRCULAR: (
        curves.circular_in,
        curves.circular_out,
        curves.circular_in_out,
    ),
    EasingFamily.BACK: (curves.back_in, curves.back_out, curves.back_in_out),
    EasingFamily.ELASTIC: (
        curves.elastic_in,
        curves.elastic_out,
        curves.elastic_in_out,
    ),
}


def linear(x: float) -> float:
    return x


def curve_for(kind: EasingKind) -> EasingFn:
    return FAMILIES[kind.family][_MODE_INDEX[kind.mode]]


EASINGS: dict[str, EasingFn] = {"linear": linear}
EASINGS.update((kind.value, curve_for(kind)) for kind in EasingKind)


def get_easing(easing: EasingKind | str) -> EasingFn:
    """Return the curve for a kind or a registered name.

    Names are matched after normalisation, so ``"Cubic-In-Out"`` and
    ``"cubic in out"`` both resolve to ``cubic_in_out``.

    Raises:
        UnknownEasingError: if ``easing`` is neither a kind nor a known name.
    """
    if isinstance(easing, EasingKind):
        return curve_for(easing)
    if not isinstance(easing, str):
        raise UnknownEasingError(easing)
    fn = EASINGS.get(easing)
    if fn is None:
        fn = EASINGS.get(normalize_name(easing))
        if fn is None:
            raise UnknownEasingError(easing)
        logger.debug("resolved easing %r as %r", easing, normalize_name(easing))
    return fn


def ease(kind: EasingKind | str, x: float) -> float:
    """Evaluate the easing curve ``kind`` at progress ``x``."""
    return get_easing(kind)(float(x))
