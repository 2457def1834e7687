"""
Tests for the Actor.
"""

import pytest

from core.actor import Actor


class TestActor:
    """Test cases for the Actor class."""

    def test_actor_initialization(self):
        """An actor starts at rest where it was placed."""
        actor = Actor(x=72, y=300, radius=12)
        assert actor.x == 72
        assert actor.y == 300
        assert actor.velocity == 0
        assert actor.radius == 12

    def test_x_is_read_only(self):
        """The world scrolls, the actor never moves horizontally."""
        actor = Actor(x=72, y=300, radius=12)
        with pytest.raises(AttributeError):
            actor.x = 10

    def test_apply_gravity_adds_constant(self):
        """Gravity changes velocity, not position."""
        actor = Actor(x=72, y=300, radius=12, velocity=1.0)
        actor.apply_gravity(0.35)
        assert actor.velocity == pytest.approx(1.35)
        assert actor.y == 300

    def test_gravity_is_not_capped(self):
        """There is no terminal velocity."""
        actor = Actor(x=72, y=300, radius=12)
        for _ in range(1000):
            actor.apply_gravity(0.35)
        assert actor.velocity == pytest.approx(350.0)

    def test_integrate_moves_by_velocity(self):
        """integrate() moves y by velocity."""
        actor = Actor(x=72, y=300, radius=12, velocity=-4.0)
        actor.integrate()
        assert actor.y == pytest.approx(296.0)

    def test_flap_overrides_velocity(self):
        """Flap sets velocity outright, whatever it was."""
        actor = Actor(x=72, y=300, radius=12, velocity=15.0)
        actor.flap(-6.2)
        assert actor.velocity == -6.2

    def test_repeated_flaps_do_not_stack(self):
        """Two flaps in a row give one flap's velocity."""
        actor = Actor(x=72, y=300, radius=12)
        actor.flap(-6.2)
        actor.flap(-6.2)
        assert actor.velocity == -6.2

    @pytest.mark.parametrize("velocity, expected", [
        (0.0, 0.0),
        (2.0, 6.0),
        (-6.2, -18.6),
        (20.0, 30.0),
        (-20.0, -30.0),
    ])
    def test_rotation_follows_velocity_and_clamps(self, velocity, expected):
        """Rotation is velocity times three, clamped to 30 degrees."""
        actor = Actor(x=72, y=300, radius=12, velocity=velocity)
        assert actor.rotation == pytest.approx(expected)
