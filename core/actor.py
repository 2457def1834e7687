"""
core/actor.py — The player-controlled bird.

Actor owns position and vertical velocity and nothing else. The world
scrolls past it, so x never changes after construction. All three
operations are plain mutations: no clamping, no I/O, no knowledge of
the world they live in. session.py is the sole caller.

Usage:
    actor = Actor(x=72, y=300, radius=12)
    actor.flap(-6.2)          # instantaneous upward velocity

    # each tick:
    actor.apply_gravity(0.35)
    actor.integrate()
"""

# Display-only rotation: degrees per unit of velocity, clamped to ±_MAX_TILT
_TILT_PER_VELOCITY = 3.0
_MAX_TILT          = 30.0


class Actor:
    """Position and velocity of the bird.

    Attributes:
        x:        Horizontal position. Fixed for the actor's lifetime.
        y:        Vertical position of the centre, y grows downward.
        velocity: Vertical velocity in px per tick. Negative is upward.
        radius:   Collision envelope radius in px.
    """

    __slots__ = ("_x", "y", "velocity", "radius")

    def __init__(self, x: float, y: float, radius: float, velocity: float = 0.0) -> None:
        self._x = float(x)
        self.y = float(y)
        self.velocity = float(velocity)
        self.radius = float(radius)

    @property
    def x(self) -> float:
        return self._x

    @property
    def rotation(self) -> float:
        """Nose tilt in degrees derived from velocity. Display only."""
        tilt = self.velocity * _TILT_PER_VELOCITY
        return max(-_MAX_TILT, min(_MAX_TILT, tilt))

    def apply_gravity(self, gravity: float) -> None:
        """Add one tick of constant acceleration. Velocity is not capped."""
        self.velocity += gravity

    def integrate(self) -> None:
        """Move by the current velocity."""
        self.y += self.velocity

    def flap(self, power: float) -> None:
        """Override velocity with the flap impulse.

        The previous velocity is discarded, so repeated flaps never stack.

        Args:
            power: New vertical velocity, negative for upward.
        """
        self.velocity = power

    def __repr__(self) -> str:
        return f"Actor(x={self._x}, y={self.y:.2f}, velocity={self.velocity:.2f})"
