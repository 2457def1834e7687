"""
settings.py — Global constants for Flappy Canvas.

All magic numbers live here. No other module should hardcode colors,
dimensions, physics or timing values. Import what you need with:
    from settings import COLOR, SCREEN_W, ...

Physics values are per-tick, not per-second: the simulation advances in
fixed steps of 1 / TICK_RATE seconds and every constant below is tuned
for that step size.
"""

import os
from pathlib import Path

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 400
SCREEN_H = 600
FPS = 60
TITLE = "Flappy Canvas"

# ── Simulation clock ──────────────────────────────────────────────────────────
TICK_RATE           = 60    # fixed simulation steps per second
MAX_STEPS_PER_FRAME = 5     # catch-up cap after a stall (tab switch, drag)

# ── Physics (per tick) ────────────────────────────────────────────────────────
GRAVITY    = 0.35   # low gravity
FLAP_POWER = -6.2   # strong flap, negative = upward

# ── Actor ─────────────────────────────────────────────────────────────────────
ACTOR_X      = 72
ACTOR_RADIUS = 12

# ── Pipes ─────────────────────────────────────────────────────────────────────
PIPE_SPEED          = 1.6   # px per tick
PIPE_GAP            = 120   # generous gap for easy play
PIPE_WIDTH          = 42
PIPE_SPAWN_INTERVAL = 100   # ticks between pipes
PIPE_LEAD_IN        = 20    # spawn this far past the right edge
PIPE_PRUNE_MARGIN   = 20    # drop once the right edge is this far off-screen
PIPE_TOP_MARGIN     = 80    # lowest gap centre value
PIPE_SAFETY_MARGIN  = 112   # keeps the gap clear of the ground

# ── World ─────────────────────────────────────────────────────────────────────
GROUND_H = 28

# ── Persistence ───────────────────────────────────────────────────────────────
HIGH_SCORE_KEY = "flappyHighScore"
SAVE_DIR       = Path(os.environ.get("FLAPPY_SAVE_DIR", Path.home() / ".flappy"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("FLAPPY_LOG_LEVEL", "INFO").upper()

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "sky_top":       (135, 206, 235),   # #87CEEB
    "sky_upper":     (176, 224, 230),   # #B0E0E6
    "sky_mid":       (255, 228, 181),   # #FFE4B5
    "sky_low":       (255, 218, 185),   # #FFDAB9
    "sky_bottom":    (240, 230, 140),   # #F0E68C
    "cloud":         (255, 255, 255),
    "cloud_shadow":  (200, 200, 200),
    "ground_top":    (139,  69,  19),   # #8B4513
    "ground_mid":    (122,   0,  25),   # #7A0019
    "ground_bottom": ( 90,   0,  21),   # #5A0015
    "ground_stripe": (155,  90,  42),   # #9B5A2A
    "grass":         ( 34, 139,  34),   # #228B22
    "pipe":          ( 46, 139,  87),
    "pipe_dark":     ( 34, 100,  60),
    "pipe_light":    (102, 205, 120),
    "pipe_border":   ( 20,  70,  40),
    "bird":          (255, 215,   0),   # #FFD700
    "bird_light":    (255, 250, 205),   # #FFFACD
    "bird_edge":     (139,  69,  19),
    "beak":          (255, 140,   0),   # #FF8C00
    "eye":           (255, 255, 255),
    "pupil":         ( 20,  20,  20),
    "particle":      (255, 255, 255),
    "trail":         (255, 215,   0),
    "text":          (255, 255, 255),
    "text_shadow":   (  0,   0,   0),
    "text_dim":      (204, 204, 204),   # #CCCCCC
    "high_score":    (255, 204,  51),   # #FFCC33
    "record":        ( 76, 175,  80),   # #4CAF50
    "box":           ( 30,  30,  30),
    "box_border":    (122,   0,  25),   # #7A0019
}

# Sky gradient stops as (position, color), top to bottom
SKY_STOPS = (
    (0.0, COLOR["sky_top"]),
    (0.3, COLOR["sky_upper"]),
    (0.6, COLOR["sky_mid"]),
    (0.8, COLOR["sky_low"]),
    (1.0, COLOR["sky_bottom"]),
)

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_FAMILY  = "opensans,arial"
FONT_SIZE_XL = 32
FONT_SIZE_LG = 24
FONT_SIZE_MD = 18
FONT_SIZE_SM = 14
