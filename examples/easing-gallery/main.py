"""Easing Gallery - every tick-ease curve in one window.

Exercises tick-ease and tick-tween: a single Tween drives the tracking dot
across all 27 plots.

Controls:
  Space   Restart the sweep
  L       Toggle looping
  +/-     Adjust sweep duration
  Esc     Quit

Run:
    python main.py
"""
from __future__ import annotations

import pygame

from tick_ease import EasingKind
from tick_tween import Tween, make_tween_system

from ui.constants import (
    BG_COLOR,
    CELL_H,
    CELL_W,
    FAMILIES,
    FPS,
    HEADER_H,
    LABEL_COLOR,
    LABEL_W,
    MODES,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TPS,
)
from ui.curves import draw_curve_plot


class GalleryState:
    """Holds the sweep tween and display options."""

    def __init__(self) -> None:
        self.duration = 40  # ticks
        self.loop = True
        self.t = 0.0
        self.tweens: dict[str, Tween] = {}
        self.system = make_tween_system(on_complete=self._on_complete)
        self.restart()

    def restart(self) -> None:
        self.tweens["sweep"] = Tween(start_val=0.0, end_val=1.0, duration=self.duration)

    def _on_complete(self, key: str, tween: Tween) -> None:
        if self.loop:
            self.restart()

    def _apply(self, key: str, value: float) -> None:
        self.t = value

    def step(self) -> None:
        self.system(self.tweens, self._apply)


def draw_grid(surface: pygame.Surface, font: pygame.font.Font, t: float) -> None:
    for col, mode in enumerate(MODES):
        label = font.render(mode.value, True, LABEL_COLOR)
        surface.blit(label, (LABEL_W + col * CELL_W + 8, 8))

    for row, family in enumerate(FAMILIES):
        y = HEADER_H + row * CELL_H
        label = font.render(family.value, True, LABEL_COLOR)
        surface.blit(label, (8, y + CELL_H // 2 - 7))
        for col, mode in enumerate(MODES):
            kind = EasingKind.of(family, mode)
            draw_curve_plot(surface, kind, LABEL_W + col * CELL_W, y, CELL_W, CELL_H, t)


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, state: GalleryState) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = (
        f"t={state.t:.2f}  duration={state.duration} ticks  "
        f"loop={'on' if state.loop else 'off'}  [Space] restart [L] loop [+/-] speed"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (8, y + 8))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tick-ease demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    state.restart()

                elif event.key == pygame.K_l:
                    state.loop = not state.loop
                    if state.loop and not state.tweens:
                        state.restart()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration = min(state.duration + 20, 200)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration = max(state.duration - 20, 20)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_grid(screen, font, state.t)
        draw_status_bar(screen, font, state)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
