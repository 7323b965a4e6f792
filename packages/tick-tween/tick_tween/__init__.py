"""tick-tween - Tick-driven value interpolation using the tick-ease table."""
from __future__ import annotations

from tick_tween.components import Tween, tween_value
from tick_tween.systems import make_tween_system

__all__ = ["Tween", "make_tween_system", "tween_value"]
