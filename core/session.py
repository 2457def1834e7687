"""
core/session.py — Simulation state machine for Flappy Canvas.

GameSession owns the actor, the obstacle field, the jump effects and a
scoreboard, and is the only thing that mutates them. Callers drive it
through four operations and read it through snapshot().

States:
    IDLE       — nothing advances; the start overlay is implied
    RUNNING    — update() advances the simulation one fixed tick per call
    GAME_OVER  — simulation frozen, final snapshot retained

Transitions:
    IDLE       → RUNNING    : start()
    GAME_OVER  → RUNNING    : start() (replay without an explicit reset)
    RUNNING    → GAME_OVER  : update() detects a collision
    any        → IDLE       : reset()

Redundant calls (flap() outside RUNNING, start() while RUNNING, update()
outside RUNNING) are no-ops, never errors.

Tick order inside update() is fixed:
    1. effects age
    2. actor: gravity, then integrate
    3. obstacles: spawn, then scroll and prune
    4. newly passed obstacles score
    5. collision check
Scoring runs before the collision check, so a pipe cleared on
the same tick the actor dies still counts.

The session does not own a clock. Something outside (the presenter's
fixed-step accumulator) calls update() at a steady cadence and stops
once the state reads GAME_OVER.

Usage:
    session = GameSession(Scoreboard(MemoryScoreStorage()))
    session.start()
    session.flap()
    while session.update() is GameState.RUNNING:
        ...
    snap = session.snapshot()
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from core.actor import Actor
from core.collision import first_collision
from core.effects import JumpEffects
from core.obstacles import ObstacleField, RandomSource
from core.scoreboard import Scoreboard
import settings

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Lifecycle states of one session."""
    IDLE      = auto()
    RUNNING   = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class WorldConfig:
    """Every tunable the simulation reads. Built once, shared read-only."""
    width:            float = settings.SCREEN_W
    height:           float = settings.SCREEN_H
    ground:           float = settings.GROUND_H
    gravity:          float = settings.GRAVITY
    flap_power:       float = settings.FLAP_POWER
    actor_x:          float = settings.ACTOR_X
    actor_radius:     float = settings.ACTOR_RADIUS
    pipe_speed:       float = settings.PIPE_SPEED
    pipe_gap:         float = settings.PIPE_GAP
    pipe_width:       float = settings.PIPE_WIDTH
    spawn_interval:   int   = settings.PIPE_SPAWN_INTERVAL
    lead_in:          float = settings.PIPE_LEAD_IN
    prune_margin:     float = settings.PIPE_PRUNE_MARGIN
    top_margin:       float = settings.PIPE_TOP_MARGIN
    safety_margin:    float = settings.PIPE_SAFETY_MARGIN

    def __post_init__(self) -> None:
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {self.spawn_interval}")
        if self.height - self.ground - self.safety_margin < self.top_margin:
            raise ValueError("World too short: the pipe gap band is empty")

    @property
    def start_y(self) -> float:
        return self.height / 2

    @classmethod
    def from_settings(cls) -> WorldConfig:
        """Build a config from the values settings.py holds at call time."""
        return cls(
            width=settings.SCREEN_W,
            height=settings.SCREEN_H,
            ground=settings.GROUND_H,
            gravity=settings.GRAVITY,
            flap_power=settings.FLAP_POWER,
            actor_x=settings.ACTOR_X,
            actor_radius=settings.ACTOR_RADIUS,
            pipe_speed=settings.PIPE_SPEED,
            pipe_gap=settings.PIPE_GAP,
            pipe_width=settings.PIPE_WIDTH,
            spawn_interval=settings.PIPE_SPAWN_INTERVAL,
            lead_in=settings.PIPE_LEAD_IN,
            prune_margin=settings.PIPE_PRUNE_MARGIN,
            top_margin=settings.PIPE_TOP_MARGIN,
            safety_margin=settings.PIPE_SAFETY_MARGIN,
        )


@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    velocity: float
    radius: float
    rotation: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_y: float
    passed: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only picture of a session for presenters.

    Particles are (x, y, alpha); trails are (x, y, alpha). Both are purely
    cosmetic.
    """
    state:      GameState
    tick:       int
    actor:      ActorView
    obstacles:  tuple[ObstacleView, ...]
    score:      int
    best:       int
    new_record: bool
    particles:  tuple[tuple[float, float, float], ...] = ()
    trails:     tuple[tuple[float, float, float], ...] = ()


class GameSession:
    """One embedding's game: actor, pipes, score and the state machine.

    Attributes:
        config:     World tunables.
        scoreboard: Score and persisted best.
        state:      Current GameState.
        tick_count: Ticks advanced since the last start().
        actor:      The bird. Replaced on start() and reset().
        field:      Live pipes.
        effects:    Cosmetic jump particles.
        new_record: True if the last GAME_OVER beat the previous best.
    """

    def __init__(
        self,
        scoreboard: Scoreboard,
        config: WorldConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config     = config if config is not None else WorldConfig.from_settings()
        self.scoreboard = scoreboard
        self.field      = ObstacleField(
            world_width=self.config.width,
            rng=rng if rng is not None else random.Random(),
            width=self.config.pipe_width,
            gap_height=self.config.pipe_gap,
            lead_in=self.config.lead_in,
            prune_margin=self.config.prune_margin,
            top_margin=self.config.top_margin,
            safety_margin=self.config.safety_margin,
        )
        self.effects    = JumpEffects()
        self.state      = GameState.IDLE
        self.tick_count = 0
        self.actor      = self._fresh_actor()
        self.new_record = False
        self._final: Snapshot | None = None

    # ── Control surface ───────────────────────────────────────────────────────

    def start(self) -> bool:
        """Begin a new run from IDLE or GAME_OVER.

        Returns:
            True if a run started, False if one was already RUNNING.
        """
        if self.state is GameState.RUNNING:
            logger.debug("start() ignored: already running")
            return False

        self._clear()
        self.state = GameState.RUNNING
        logger.info("Session started (best=%d)", self.scoreboard.best)
        return True

    def flap(self) -> bool:
        """Kick the actor upward. Only effective while RUNNING.

        Returns:
            True if the flap was applied.
        """
        if self.state is not GameState.RUNNING:
            logger.debug("flap() ignored in state %s", self.state.name)
            return False

        self.actor.flap(self.config.flap_power)
        self.effects.emit(self.actor.x, self.actor.y)
        return True

    def reset(self) -> None:
        """Return to IDLE with fresh state. Safe to call repeatedly."""
        self._clear()
        self.state = GameState.IDLE

    def update(self) -> GameState:
        """Advance one fixed tick.

        No-op unless RUNNING.

        Returns:
            The state after the tick, so drivers can stop on GAME_OVER.
        """
        if self.state is not GameState.RUNNING:
            return self.state

        cfg = self.config
        self.tick_count += 1

        self.effects.update()

        self.actor.apply_gravity(cfg.gravity)
        self.actor.integrate()

        self.field.maybe_spawn(self.tick_count, cfg.spawn_interval, cfg.height, cfg.ground)
        self.field.tick(cfg.pipe_speed)

        for _ in range(self.field.detect_and_mark_passed(self.actor.x, self.actor.radius)):
            self.scoreboard.increment()

        reason = first_collision(
            self.actor, self.field, cfg.height, cfg.ground, cfg.pipe_gap, cfg.pipe_width,
        )
        if reason is not None:
            self._end(reason)

        return self.state

    def snapshot(self) -> Snapshot:
        """Return a read-only view. Frozen once GAME_OVER is entered."""
        if self.state is GameState.GAME_OVER and self._final is not None:
            return self._final
        return self._capture()

    # ── Internals ─────────────────────────────────────────────────────────────

    def _fresh_actor(self) -> Actor:
        return Actor(x=self.config.actor_x, y=self.config.start_y, radius=self.config.actor_radius)

    def _clear(self) -> None:
        self.actor = self._fresh_actor()
        self.field.clear()
        self.effects.clear()
        self.scoreboard.reset_score()
        self.tick_count = 0
        self.new_record = False
        self._final = None

    def _end(self, reason: str) -> None:
        """Enter GAME_OVER: finalize the score once and freeze the picture."""
        self.state = GameState.GAME_OVER
        try:
            self.new_record = self.scoreboard.finalize()
        finally:
            self._final = self._capture()
        logger.info(
            "Game over (%s) at tick %d: score=%d best=%d%s",
            reason, self.tick_count, self.scoreboard.score, self.scoreboard.best,
            " new record" if self.new_record else "",
        )

    def _capture(self) -> Snapshot:
        a = self.actor
        return Snapshot(
            state=self.state,
            tick=self.tick_count,
            actor=ActorView(a.x, a.y, a.velocity, a.radius, a.rotation),
            obstacles=tuple(ObstacleView(o.x, o.gap_y, o.passed) for o in self.field),
            score=self.scoreboard.score,
            best=self.scoreboard.best,
            new_record=self.new_record,
            particles=tuple((p.x, p.y, p.alpha) for p in self.effects.particles),
            trails=tuple((t.x, t.y, t.alpha) for t in self.effects.trails),
        )
