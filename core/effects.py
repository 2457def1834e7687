"""
core/effects.py — Cosmetic jump particles and trails.

Each flap emits a ring of particles that drift and fall, plus a short
column of fading trail dots. Effects never influence the simulation;
they age once per tick as the first step of GameSession.update() and the
scene renderer draws whatever is still alive.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

_PARTICLE_COUNT   = 8
_PARTICLE_LIFE    = 20
_PARTICLE_SPEED_X = 2.0
_PARTICLE_SPEED_Y = 1.5
_PARTICLE_GRAVITY = 0.15

_TRAIL_COUNT   = 5
_TRAIL_SPACING = 2
_TRAIL_LIFE    = 15


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int

    @property
    def alpha(self) -> float:
        return self.life / self.max_life


@dataclass
class Trail:
    x: float
    y: float
    life: int
    max_life: int

    @property
    def alpha(self) -> float:
        return self.life / self.max_life


class JumpEffects:
    """Live particles and trails.

    Attributes:
        particles: Burst particles, oldest first.
        trails:    Trail dots, oldest first.
    """

    def __init__(self) -> None:
        self.particles: list[Particle] = []
        self.trails:    list[Trail]    = []

    def emit(self, x: float, y: float) -> None:
        """Spawn one flap's worth of particles and trail dots at (x, y)."""
        for i in range(_PARTICLE_COUNT):
            angle = 2 * math.pi * i / _PARTICLE_COUNT
            self.particles.append(Particle(
                x=x, y=y,
                vx=math.cos(angle) * _PARTICLE_SPEED_X,
                vy=math.sin(angle) * _PARTICLE_SPEED_Y,
                life=_PARTICLE_LIFE, max_life=_PARTICLE_LIFE,
            ))
        for i in range(_TRAIL_COUNT):
            life = _TRAIL_LIFE + i * _TRAIL_SPACING
            self.trails.append(Trail(x=x, y=y + i * _TRAIL_SPACING, life=life, max_life=life))

    def update(self) -> None:
        """Age everything by one tick and drop what has expired."""
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vy += _PARTICLE_GRAVITY
            p.life -= 1
        for t in self.trails:
            t.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]
        self.trails    = [t for t in self.trails if t.life > 0]

    def clear(self) -> None:
        self.particles.clear()
        self.trails.clear()
