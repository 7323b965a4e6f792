"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_ease import EasingKind, get_easing

from ui.constants import CELL_BORDER, CURVE_BG, GUIDE_COLOR, MODE_COLORS, TEXT_DIM, Y_MAX, Y_MIN


def _to_screen(t: float, v: float, x: int, y: int, w: int, h: int) -> tuple[float, float]:
    py = y + h - (v - Y_MIN) / (Y_MAX - Y_MIN) * h
    return x + t * w, py


def draw_curve_plot(
    surface: pygame.Surface,
    kind: EasingKind,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot."""
    pad = 6
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - 2 * pad
    plot_h = h - 2 * pad

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))
    pygame.draw.rect(surface, CELL_BORDER, (x, y, w, h), 1)

    # 0 and 1 guides
    for level in (0.0, 1.0):
        _, gy = _to_screen(0.0, level, plot_x, plot_y, plot_w, plot_h)
        pygame.draw.line(surface, GUIDE_COLOR, (plot_x, gy), (plot_x + plot_w, gy))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y), (plot_x, plot_y + plot_h))

    easing_fn = get_easing(kind)
    color = MODE_COLORS[kind.mode]
    samples = 80
    points = [
        _to_screen(i / samples, easing_fn(i / samples), plot_x, plot_y, plot_w, plot_h)
        for i in range(samples + 1)
    ]
    pygame.draw.lines(surface, color, False, points, 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        dot_x, dot_y = _to_screen(current_t, easing_fn(current_t), plot_x, plot_y, plot_w, plot_h)
        pygame.draw.circle(surface, (255, 255, 255), (int(dot_x), int(dot_y)), 4)
        pygame.draw.circle(surface, color, (int(dot_x), int(dot_y)), 3)
