"""Closed-form easing curves (https://easings.net).

Every function maps a progress value ``x`` (conventionally in [0, 1]) to an
eased value. Nothing is clamped: inputs outside [0, 1] extrapolate, and NaN or
infinite inputs propagate the way IEEE arithmetic would. The ``math`` module
raises on some of those inputs, so square roots, trig and powers of two go
through the small wrappers below.
"""
from __future__ import annotations

import math
from typing import Callable

from tick_ease.mathf import is_one_approx, is_zero_approx

BACK_C1 = 1.70158
BACK_C3 = BACK_C1 + 1.0
BACK_IN_OUT_C2 = 2.594909
BACK_IN_OUT_C3 = 3.594909

ELASTIC_C4 = 2.0 * math.pi / 3.0
ELASTIC_C5 = 1.396263402

HALF_PI = math.pi * 0.5


def _sqrt(v: float) -> float:
    return math.sqrt(v) if v >= 0.0 else math.nan


def _sin(v: float) -> float:
    return math.sin(v) if math.isfinite(v) else math.nan


def _cos(v: float) -> float:
    return math.cos(v) if math.isfinite(v) else math.nan


def _exp2(p: float) -> float:
    try:
        return 2.0 ** p
    except OverflowError:
        return math.inf


def _pow(b: float, n: int) -> float:
    # Repeated multiplication overflows to inf instead of raising.
    result = 1.0
    for _ in range(n):
        result *= b
    return result


# -- sine ---------------------------------------------------------------


def sine_in(x: float) -> float:
    return 1.0 - _cos(x * HALF_PI)


def sine_out(x: float) -> float:
    return _sin(x * HALF_PI)


def sine_in_out(x: float) -> float:
    return -(_cos(math.pi * x) - 1.0) * 0.5


# -- polynomials ----------------------------------------------------------


def _poly_in(n: int) -> Callable[[float], float]:
    def ease_in(x: float) -> float:
        return _pow(x, n)

    return ease_in


def _poly_out(n: int) -> Callable[[float], float]:
    def ease_out(x: float) -> float:
        return 1.0 - _pow(1.0 - x, n)

    return ease_out


def _poly_in_out(n: int) -> Callable[[float], float]:
    scale = float(2 ** (n - 1))

    def ease_in_out(x: float) -> float:
        if x < 0.5:
            return scale * _pow(x, n)
        return 1.0 - _pow(-2.0 * x + 2.0, n) * 0.5

    return ease_in_out


quadratic_in = _poly_in(2)
quadratic_out = _poly_out(2)
quadratic_in_out = _poly_in_out(2)
cubic_in = _poly_in(3)
cubic_out = _poly_out(3)
cubic_in_out = _poly_in_out(3)
quartic_in = _poly_in(4)
quartic_out = _poly_out(4)
quartic_in_out = _poly_in_out(4)
quintic_in = _poly_in(5)
quintic_out = _poly_out(5)
quintic_in_out = _poly_in_out(5)


# -- exponential ------------------------------------------------------------


def exponential_in(x: float) -> float:
    if is_zero_approx(x):
        return 0.0
    return _exp2(10.0 * x - 10.0)


def exponential_out(x: float) -> float:
    if is_one_approx(x):
        return 1.0
    return 1.0 - _exp2(-10.0 * x)


def exponential_in_out(x: float) -> float:
    if is_zero_approx(x):
        return 0.0
    if is_one_approx(x):
        return 1.0
    if x < 0.5:
        return _exp2(20.0 * x - 10.0) * 0.5
    return (2.0 - _exp2(-20.0 * x + 10.0)) * 0.5


# -- circular -----------------------------------------------------------------


def circular_in(x: float) -> float:
    return 1.0 - _sqrt(1.0 - x * x)


def circular_out(x: float) -> float:
    return _sqrt(1.0 - _pow(x - 1.0, 2))


def circular_in_out(x: float) -> float:
    if x < 0.5:
        return (1.0 - _sqrt(1.0 - _pow(2.0 * x, 2))) * 0.5
    return (_sqrt(1.0 - _pow(-2.0 * x + 2.0, 2)) + 1.0) * 0.5


# -- back ----------------------------------------------------------------------


def back_in(x: float) -> float:
    return BACK_C3 * x * x * x - BACK_C1 * x * x


def back_out(x: float) -> float:
    return 1.0 + BACK_C3 * _pow(x - 1.0, 3) + BACK_C1 * _pow(x - 1.0, 2)


def back_in_out(x: float) -> float:
    if x < 0.5:
        return _pow(2.0 * x, 2) * (BACK_IN_OUT_C3 * 2.0 * x - BACK_IN_OUT_C2) * 0.5
    return (_pow(2.0 * x - 2.0, 2) * (BACK_IN_OUT_C3 * (x * 2.0 - 2.0) + BACK_IN_OUT_C2) + 2.0) * 0.5


# -- elastic -----------------------------------------------------------------


def elastic_in(x: float) -> float:
    if is_zero_approx(x):
        return 0.0
    if is_one_approx(x):
        return 1.0
    return -_exp2(10.0 * x - 10.0) * _sin((x * 10.0 - 10.75) * ELASTIC_C4)


def elastic_out(x: float) -> float:
    if is_zero_approx(x):
        return 0.0
    if is_one_approx(x):
        return 1.0
    return _exp2(-10.0 * x) * _sin((x * 10.0 - 0.75) * ELASTIC_C4) + 1.0


def elastic_in_out(x: float) -> float:
    if is_zero_approx(x):
        return 0.0
    if is_one_approx(x):
        return 1.0
    if x < 0.5:
        return -(_exp2(20.0 * x - 10.0) * _sin((20.0 * x - 11.125) * ELASTIC_C5)) * 0.5
    return _exp2(-20.0 * x + 10.0) * _sin((20.0 * x - 11.125) * ELASTIC_C5) * 0.5 + 1.0
