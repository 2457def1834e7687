"""
renderer/scene.py — World rendering for Flappy Canvas.

Draws everything that lives in the world, back to front:
    - Sky gradient and drifting clouds
    - Pipes with caps and a highlight stripe
    - Jump particles and trails
    - The bird, tilted by its velocity
    - Ground with stripes and swaying grass

All functions are stateless apart from cached static surfaces. They read
a Snapshot produced by core/session.py and never write to it. Animation
phase (clouds, grass, wing beat) is driven by snapshot.tick, so a frozen
game-over snapshot draws a frozen frame.
"""

import math
import pygame
from settings import (
    SCREEN_W, SCREEN_H, GROUND_H,
    PIPE_WIDTH, PIPE_GAP,
    COLOR, SKY_STOPS,
)
from core.session import Snapshot, ActorView, ObstacleView
from utils.color import RGBColor, darker, gradient_at, lerp_color, with_alpha

_CAP_H       = 18
_CAP_OVERHANG = 3

# Clouds: (speed, phase, y, size)
_CLOUDS = (
    (0.30,   0,  60, 45),
    (0.20, 200,  40, 40),
    (0.25, 350,  80, 50),
    (0.15, 500, 100, 35),
)

# ── Static surface cache ──────────────────────────────────────────────────────
_cache: dict[str, pygame.Surface] = {}


def _vertical_gradient(w: int, h: int, stops) -> pygame.Surface:
    surf = pygame.Surface((w, h))
    for y in range(h):
        color = gradient_at(stops, y / max(1, h - 1))
        pygame.draw.line(surf, color, (0, y), (w - 1, y))
    return surf


def _sky() -> pygame.Surface:
    if "sky" not in _cache:
        _cache["sky"] = _vertical_gradient(SCREEN_W, SCREEN_H, SKY_STOPS)
    return _cache["sky"]


def _ground() -> pygame.Surface:
    if "ground" not in _cache:
        surf = _vertical_gradient(SCREEN_W, GROUND_H, (
            (0.0, COLOR["ground_top"]),
            (0.5, COLOR["ground_mid"]),
            (1.0, COLOR["ground_bottom"]),
        ))
        for x in range(0, SCREEN_W, 12):
            pygame.draw.rect(surf, COLOR["ground_stripe"], (x, 0, 2, GROUND_H))
        _cache["ground"] = surf
    return _cache["ground"]


# ── Background ────────────────────────────────────────────────────────────────

def _draw_cloud(surface: pygame.Surface, x: float, y: float, size: float) -> None:
    """Draw one puffy cloud out of overlapping circles, with a soft shadow."""
    puffs = (
        (0.0, 0.0, 0.5), (0.3, 0.0, 0.6), (0.6, 0.0, 0.4),
        (0.2, -0.3, 0.4), (0.5, -0.3, 0.5),
    )
    layer = pygame.Surface((int(size * 2.5), int(size * 2)), pygame.SRCALPHA)
    ox, oy = size * 0.7, size * 1.1
    for dx, dy, r in puffs:
        pygame.draw.circle(layer, with_alpha(COLOR["cloud_shadow"], 0.3),
                           (ox + dx * size + 2, oy + dy * size + 2), r * size)
    for dx, dy, r in puffs:
        pygame.draw.circle(layer, with_alpha(COLOR["cloud"], 0.9),
                           (ox + dx * size, oy + dy * size), r * size)
    pygame.draw.circle(layer, with_alpha(COLOR["cloud"], 0.5),
                       (ox - size * 0.1, oy - size * 0.2), size * 0.3)
    surface.blit(layer, (x - ox, y - oy))


def draw_background(surface: pygame.Surface, tick: int) -> None:
    """Draw the sky and clouds. Clouds drift with the tick counter."""
    surface.blit(_sky(), (0, 0))
    for speed, phase, y, size in _CLOUDS:
        x = (tick * speed + phase) % (SCREEN_W + 100) - 50
        _draw_cloud(surface, x, y, size)


def draw_ground(surface: pygame.Surface, tick: int) -> None:
    """Draw the ground strip with grass swaying over time."""
    top = SCREEN_H - GROUND_H
    surface.blit(_ground(), (0, top))
    for x in range(0, SCREEN_W, 8):
        blade = 3 + math.sin(x * 0.1 + tick * 0.1) * 2
        pygame.draw.rect(surface, COLOR["grass"], (x, top, 1, max(1, int(blade))))


# ── Pipes ─────────────────────────────────────────────────────────────────────

def _pipe_body(surface: pygame.Surface, x: float, y: float, h: float) -> None:
    if h <= 0:
        return
    rect = pygame.Rect(int(x), int(y), PIPE_WIDTH, int(h))
    for i in range(PIPE_WIDTH):
        t = i / (PIPE_WIDTH - 1)
        color = lerp_color(COLOR["pipe_light"], COLOR["pipe_dark"], abs(t - 0.3) / 0.7)
        pygame.draw.line(surface, color, (rect.x + i, rect.top), (rect.x + i, rect.bottom - 1))
    pygame.draw.rect(surface, COLOR["pipe_border"], rect, 2)
    pygame.draw.rect(surface, COLOR["pipe_light"], (rect.x + 2, rect.y, 3, rect.height))


def _pipe_cap(surface: pygame.Surface, x: float, y: float) -> None:
    rect = pygame.Rect(int(x) - _CAP_OVERHANG, int(y), PIPE_WIDTH + _CAP_OVERHANG * 2, _CAP_H)
    pygame.draw.rect(surface, COLOR["pipe"], rect)
    pygame.draw.rect(surface, COLOR["pipe_border"], rect, 2)


def draw_pipe(surface: pygame.Surface, obstacle: ObstacleView) -> None:
    """Draw one pipe pair: upper body and cap, lower body and cap."""
    gap_top    = obstacle.gap_y - PIPE_GAP / 2
    gap_bottom = obstacle.gap_y + PIPE_GAP / 2
    floor      = SCREEN_H - GROUND_H

    _pipe_body(surface, obstacle.x, 0, gap_top)
    _pipe_cap(surface, obstacle.x, gap_top - _CAP_H)
    _pipe_body(surface, obstacle.x, gap_bottom, floor - gap_bottom)
    _pipe_cap(surface, obstacle.x, gap_bottom)


# ── Effects ───────────────────────────────────────────────────────────────────

def draw_effects(surface: pygame.Surface, snap: Snapshot) -> None:
    """Draw fading trail dots under fading burst particles."""
    if not (snap.particles or snap.trails):
        return
    layer = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    for x, y, alpha in snap.trails:
        pygame.draw.circle(layer, with_alpha(COLOR["trail"], alpha * 0.5), (x, y), 4 * alpha + 1)
    for x, y, alpha in snap.particles:
        pygame.draw.circle(layer, with_alpha(COLOR["particle"], alpha), (x, y), 2 * alpha + 1)
    surface.blit(layer, (0, 0))


# ── Bird ──────────────────────────────────────────────────────────────────────

def _bird_sprite(radius: float, wing_offset: float) -> pygame.Surface:
    """Draw an upright bird centred in a square SRCALPHA surface."""
    r = int(radius)
    size = r * 4
    c = size // 2
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)

    # Body: radial shading from a light centre to the base yellow
    half = r * 0.5
    for i in range(r, 0, -1):
        if i > half:
            color: RGBColor = lerp_color(COLOR["bird"], COLOR["beak"], (i - half) / half)
        else:
            color = lerp_color(COLOR["bird_light"], COLOR["bird"], i / half)
        pygame.draw.circle(sprite, color, (c - (r - i) * 0.2, c - (r - i) * 0.25), i)
    pygame.draw.circle(sprite, COLOR["bird_edge"], (c, c), r, 2)

    # Wing
    wing = pygame.Rect(0, 0, int(r * 1.1), int(r * 0.7))
    wing.center = (c - r // 3, int(c + r // 4 + wing_offset))
    pygame.draw.ellipse(sprite, darker(COLOR["bird"], 30), wing)
    pygame.draw.ellipse(sprite, COLOR["bird_edge"], wing, 1)

    # Eye
    pygame.draw.circle(sprite, COLOR["eye"], (c + r // 3, c - r // 3), max(2, r // 3))
    pygame.draw.circle(sprite, COLOR["pupil"], (c + r // 3 + 1, c - r // 3), max(1, r // 6))

    # Beak
    pygame.draw.polygon(sprite, COLOR["beak"], [
        (c + r - 1, c - 3), (c + r + 7, c), (c + r - 1, c + 3),
    ])
    return sprite


def draw_bird(surface: pygame.Surface, actor: ActorView, tick: int) -> None:
    """Draw the bird at its position, tilted by its display rotation."""
    shadow = pygame.Surface((int(actor.radius * 2), int(actor.radius)), pygame.SRCALPHA)
    pygame.draw.ellipse(shadow, (0, 0, 0, 50), shadow.get_rect())
    surface.blit(shadow, (actor.x - actor.radius * 0.8, actor.y + actor.radius * 0.6))

    sprite = _bird_sprite(actor.radius, math.sin(tick * 0.3) * 2)
    # pygame rotates counter-clockwise; a falling bird should nose down
    rotated = pygame.transform.rotate(sprite, -actor.rotation)
    surface.blit(rotated, rotated.get_rect(center=(actor.x, actor.y)))


# ── Whole scene ───────────────────────────────────────────────────────────────

def draw_scene(surface: pygame.Surface, snap: Snapshot) -> None:
    """Draw the complete world for one snapshot."""
    draw_background(surface, snap.tick)
    for obstacle in snap.obstacles:
        draw_pipe(surface, obstacle)
    draw_effects(surface, snap)
    draw_bird(surface, snap.actor, snap.tick)
    draw_ground(surface, snap.tick)
