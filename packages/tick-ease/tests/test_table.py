"""Tests for easing kinds, name resolution and the EASINGS registry."""
from __future__ import annotations

import logging

import pytest

from tick_ease import (
    EASINGS,
    EasingFamily,
    EasingKind,
    EasingMode,
    UnknownEasingError,
    get_easing,
    kinds_for,
    linear,
)
from tick_ease import curves


class TestEasingKind:
    def test_twenty_seven_kinds(self) -> None:
        assert len(EasingKind) == 27

    def test_every_family_mode_pair_exists(self) -> None:
        pairs = {(k.family, k.mode) for k in EasingKind}
        assert len(pairs) == len(EasingFamily) * len(EasingMode)

    def test_family_and_mode(self) -> None:
        kind = EasingKind.QUADRATIC_IN_OUT
        assert kind.family is EasingFamily.QUADRATIC
        assert kind.mode is EasingMode.IN_OUT

    def test_of(self) -> None:
        assert EasingKind.of(EasingFamily.BACK, EasingMode.OUT) is EasingKind.BACK_OUT

    def test_overshoots(self) -> None:
        overshooting = {k for k in EasingKind if k.overshoots}
        assert {k.family for k in overshooting} == {EasingFamily.BACK, EasingFamily.ELASTIC}
        assert len(overshooting) == 6

    def test_kinds_for_order(self) -> None:
        assert kinds_for(EasingFamily.SINE) == (
            EasingKind.SINE_IN,
            EasingKind.SINE_OUT,
            EasingKind.SINE_IN_OUT,
        )


class TestFromName:
    @pytest.mark.parametrize(
        "name",
        ["cubic_in_out", "Cubic-In-Out", "cubic in out", "  CUBIC_IN_OUT "],
    )
    def test_normalises(self, name: str) -> None:
        assert EasingKind.from_name(name) is EasingKind.CUBIC_IN_OUT

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownEasingError) as info:
            EasingKind.from_name("bounce_in")
        assert info.value.name == "bounce_in"

    def test_unknown_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            EasingKind.from_name("nope")


class TestRegistry:
    def test_contains_linear_and_all_kinds(self) -> None:
        assert set(EASINGS) == {"linear"} | {k.value for k in EasingKind}

    def test_values_are_callable(self) -> None:
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_linear(self) -> None:
        assert linear(0.3) == 0.3
        assert EASINGS["linear"] is linear

    def test_registry_matches_curves_module(self) -> None:
        for kind in EasingKind:
            assert EASINGS[kind.value] is getattr(curves, kind.value)


class TestGetEasing:
    def test_by_kind(self) -> None:
        assert get_easing(EasingKind.ELASTIC_OUT) is curves.elastic_out

    def test_by_name(self) -> None:
        assert get_easing("sine_in") is curves.sine_in

    def test_by_loose_name(self) -> None:
        assert get_easing("Back-In") is curves.back_in

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownEasingError):
            get_easing("wobble")

    def test_non_string(self) -> None:
        with pytest.raises(UnknownEasingError):
            get_easing(42)  # type: ignore[arg-type]

    def test_loose_name_logs_resolution(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="tick_ease"):
            get_easing("Back-In")
        messages = [r.getMessage() for r in caplog.records if r.name == "tick_ease.table"]
        assert messages == ["resolved easing 'Back-In' as 'back_in'"]

    def test_exact_name_does_not_log(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="tick_ease"):
            get_easing("back_in")
        assert not [r for r in caplog.records if r.name == "tick_ease.table"]
