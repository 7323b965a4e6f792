"""Easing kind enumeration: 9 curve families x 3 modes."""
from __future__ import annotations

from enum import Enum


class UnknownEasingError(KeyError):
    """Raised when an easing name does not resolve to a registered curve."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"unknown easing {name!r}")


class EasingFamily(Enum):
    SINE = "sine"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    BACK = "back"
    ELASTIC = "elastic"


class EasingMode(Enum):
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


def normalize_name(name: str) -> str:
    """Lower-case ``name`` and fold ``-`` and spaces into ``_``."""
    return "_".join(name.strip().lower().replace("-", " ").split())


class EasingKind(Enum):
    """One easing curve, identified by ``<family>_<mode>``."""

    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_IN_OUT = "sine_in_out"
    QUADRATIC_IN = "quadratic_in"
    QUADRATIC_OUT = "quadratic_out"
    QUADRATIC_IN_OUT = "quadratic_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"
    QUARTIC_IN = "quartic_in"
    QUARTIC_OUT = "quartic_out"
    QUARTIC_IN_OUT = "quartic_in_out"
    QUINTIC_IN = "quintic_in"
    QUINTIC_OUT = "quintic_out"
    QUINTIC_IN_OUT = "quintic_in_out"
    EXPONENTIAL_IN = "exponential_in"
    EXPONENTIAL_OUT = "exponential_out"
    EXPONENTIAL_IN_OUT = "exponential_in_out"
    CIRCULAR_IN = "circular_in"
    CIRCULAR_OUT = "circular_out"
    CIRCULAR_IN_OUT = "circular_in_out"
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"

    @property
    def family(self) -> EasingFamily:
        return EasingFamily(self.value.split("_", 1)[0])

    @property
    def mode(self) -> EasingMode:
        return EasingMode(self.value.split("_", 1)[1])

    @property
    def overshoots(self) -> bool:
        """True for curves that leave [0, 1] between the endpoints."""
        return self.family in (EasingFamily.BACK, EasingFamily.ELASTIC)

    @classmethod
    def of(cls, family: EasingFamily, mode: EasingMode) -> EasingKind:
        return cls(f"{family.value}_{mode.value}")

    @classmethod
    def from_name(cls, name: str) -> EasingKind:
        """Resolve ``"Cubic-In-Out"``-style names to a kind."""
        try:
            return cls(normalize_name(name))
        except ValueError:
            raise UnknownEasingError(name) from None


def kinds_for(family: EasingFamily) -> tuple[EasingKind, EasingKind, EasingKind]:
    """Return the In, Out and InOut kinds of ``family``, in that order."""
    return (
        EasingKind.of(family, EasingMode.IN),
        EasingKind.of(family, EasingMode.OUT),
        EasingKind.of(family, EasingMode.IN_OUT),
    )
