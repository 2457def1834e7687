"""
core/collision.py — Pure collision predicates.

Nothing here mutates its arguments. The live field is small (world width
divided by spawn spacing), so every obstacle is tested every tick without
any spatial index.

The ceiling is not a collision: the actor may fly above the
top of the screen, where the upper pipe body still catches it.
"""

from __future__ import annotations
from typing import Iterable

from core.actor import Actor
from core.obstacles import Obstacle


def hits_ground(actor: Actor, world_height: float, ground_thickness: float) -> bool:
    """Return True if the actor's lower edge is strictly inside the ground.

    Touching the ground surface exactly is not a collision.
    """
    return actor.y + actor.radius > world_height - ground_thickness


def hits_obstacle(actor: Actor, obstacle: Obstacle, gap_height: float, width: float) -> bool:
    """Return True if the actor overlaps the solid part of a pipe pair.

    The actor collides when its horizontal extent overlaps the pipe's and
    its vertical extent leaves the gap at either end.

    Args:
        actor:      The bird.
        obstacle:   Pipe pair to test.
        gap_height: Height of the gap shared by all pipes.
        width:      Width of the pipe.
    """
    overlaps_x = (
        actor.x + actor.radius > obstacle.x
        and actor.x - actor.radius < obstacle.x + width
    )
    if not overlaps_x:
        return False

    gap_top    = obstacle.gap_y - gap_height / 2
    gap_bottom = obstacle.gap_y + gap_height / 2
    return actor.y - actor.radius < gap_top or actor.y + actor.radius > gap_bottom


def first_collision(
    actor: Actor,
    obstacles: Iterable[Obstacle],
    world_height: float,
    ground_thickness: float,
    gap_height: float,
    width: float,
) -> str | None:
    """Run every check for one tick.

    Returns:
        "ground" or "pipe" naming the first hit, or None if the actor is clear.
    """
    if hits_ground(actor, world_height, ground_thickness):
        return "ground"
    for obstacle in obstacles:
        if hits_obstacle(actor, obstacle, gap_height, width):
            return "pipe"
    return None
