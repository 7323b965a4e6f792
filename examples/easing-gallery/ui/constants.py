"""Layout constants and color definitions."""
from tick_ease import EasingFamily, EasingMode

# Timing
FPS = 60
TPS = 20

# Grid: one row per family, one column per mode
FAMILIES = list(EasingFamily)
MODES = list(EasingMode)

LABEL_W = 110
CELL_W = 180
CELL_H = 72
HEADER_H = 28
STATUS_H = 30

SCREEN_W = LABEL_W + CELL_W * len(MODES)
SCREEN_H = HEADER_H + CELL_H * len(FAMILIES) + STATUS_H

# Plot range leaves room for back/elastic overshoot
Y_MIN = -0.5
Y_MAX = 1.5

# Colors
BG_COLOR = (20, 20, 30)
CURVE_BG = (15, 15, 25)
CELL_BORDER = (50, 50, 70)
GUIDE_COLOR = (45, 45, 65)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# Mode -> curve color
MODE_COLORS: dict[EasingMode, tuple[int, int, int]] = {
    EasingMode.IN: (255, 160, 40),
    EasingMode.OUT: (60, 220, 80),
    EasingMode.IN_OUT: (220, 80, 220),
}
