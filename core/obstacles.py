"""
core/obstacles.py — Pipe spawning, scrolling, pruning and pass detection.

ObstacleField owns the ordered list of live pipes. Pipes are appended at
spawn time, so list order is spawn order and, while they scroll, also
descending x. Width and gap height are shared by every pipe in a field.

Rules applied by the field:

    1. Spawn cadence — a pipe appears when tick_count % interval == 0.
    2. Safe gap      — the gap centre is drawn uniformly from a band that
                       keeps it clear of the top margin and the ground.
    3. Prune         — a pipe is dropped once its right edge is more than
                       prune_margin px past the left boundary.
    4. Pass once     — a pipe's `passed` flag only goes False -> True, so
                       it can award at most one point.

The random source is injected. Anything with a random.Random-style
uniform(a, b) works; tests pass a seeded Random or a stub.

Usage:
    field = ObstacleField(world_width=400, rng=random.Random(7))
    field.maybe_spawn(tick_count, 100, 600, 28)
    field.tick(1.6)
    newly_passed = field.detect_and_mark_passed(actor.x, actor.radius)
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Iterator, Protocol

from settings import (
    PIPE_WIDTH, PIPE_GAP, PIPE_LEAD_IN, PIPE_PRUNE_MARGIN,
    PIPE_TOP_MARGIN, PIPE_SAFETY_MARGIN,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The slice of random.Random the field needs."""

    def uniform(self, a: float, b: float) -> float: ...


@dataclass
class Obstacle:
    """One pipe pair with a vertical gap.

    Attributes:
        x:      Left edge in px. Decreases every tick.
        gap_y:  Gap centre in px, fixed at spawn.
        passed: True once the actor has cleared this pipe.
    """
    x: float
    gap_y: float
    passed: bool = False


class ObstacleField:
    """Ordered collection of live obstacles plus the spawn policy.

    Attributes:
        world_width:    Right edge of the world in px.
        width:          Pipe width shared by all obstacles.
        gap_height:     Gap height shared by all obstacles.
        lead_in:        Spawn offset past the right edge.
        prune_margin:   How far past x=0 a right edge may go before removal.
        top_margin:     Minimum gap centre.
        safety_margin:  Clearance between the lowest gap centre and the ground.
    """

    def __init__(
        self,
        world_width: float,
        rng: RandomSource | None = None,
        width: float = PIPE_WIDTH,
        gap_height: float = PIPE_GAP,
        lead_in: float = PIPE_LEAD_IN,
        prune_margin: float = PIPE_PRUNE_MARGIN,
        top_margin: float = PIPE_TOP_MARGIN,
        safety_margin: float = PIPE_SAFETY_MARGIN,
    ) -> None:
        self.world_width   = world_width
        self.width         = width
        self.gap_height    = gap_height
        self.lead_in       = lead_in
        self.prune_margin  = prune_margin
        self.top_margin    = top_margin
        self.safety_margin = safety_margin
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._obstacles: list[Obstacle] = []

    # ── Collection protocol ───────────────────────────────────────────────────

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        """Live obstacles in spawn order."""
        return tuple(self._obstacles)

    @property
    def spawn_x(self) -> float:
        """x coordinate every new obstacle starts at."""
        return self.world_width + self.lead_in

    def add(self, obstacle: Obstacle) -> None:
        """Append an obstacle as if it had just spawned."""
        self._obstacles.append(obstacle)

    def clear(self) -> None:
        """Drop every obstacle."""
        self._obstacles.clear()

    # ── Per-tick operations ───────────────────────────────────────────────────

    def gap_band(self, world_height: float, world_margin_bottom: float) -> tuple[float, float]:
        """Return the (low, high) range gap centres are drawn from.

        Raises:
            ValueError: If the world is too short for the margins.
        """
        low  = self.top_margin
        high = world_height - world_margin_bottom - self.safety_margin
        if high < low:
            raise ValueError(
                f"Empty gap band: top margin {low} is below the floor limit {high}. "
                "Check world height, ground and safety margin."
            )
        return low, high

    def maybe_spawn(
        self,
        tick_count: int,
        interval: int,
        world_height: float,
        world_margin_bottom: float,
    ) -> Obstacle | None:
        """Append a new obstacle when the cadence says so.

        Args:
            tick_count:          Current tick number.
            interval:            Ticks between spawns.
            world_height:        Height of the world in px.
            world_margin_bottom: Ground thickness in px.

        Returns:
            The new Obstacle, or None if this tick is not a spawn tick.
        """
        if tick_count % interval != 0:
            return None

        low, high = self.gap_band(world_height, world_margin_bottom)
        obstacle = Obstacle(x=self.spawn_x, gap_y=self._rng.uniform(low, high))
        self.add(obstacle)
        logger.debug("Spawned obstacle at tick %d, gap_y=%.1f", tick_count, obstacle.gap_y)
        return obstacle

    def tick(self, speed: float) -> None:
        """Scroll every obstacle left by `speed` and prune the off-screen ones."""
        for obstacle in self._obstacles:
            obstacle.x -= speed
        self._obstacles = [
            o for o in self._obstacles
            if o.x + self.width >= -self.prune_margin
        ]

    def detect_and_mark_passed(self, actor_x: float, actor_radius: float) -> int:
        """Mark obstacles whose right edge is behind the actor's left edge.

        Args:
            actor_x:      Actor centre x.
            actor_radius: Actor collision radius.

        Returns:
            Number of obstacles that became passed on this call.
        """
        actor_left = actor_x - actor_radius
        newly_passed = 0
        for obstacle in self._obstacles:
            if not obstacle.passed and obstacle.x + self.width < actor_left:
                obstacle.passed = True
                newly_passed += 1
        return newly_passed
