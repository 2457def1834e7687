"""
Tests for the ObstacleField.
"""

import random

import pytest

from core.obstacles import Obstacle, ObstacleField


@pytest.fixture
def field(stub_rng):
    return ObstacleField(world_width=400, rng=stub_rng)


class TestSpawning:
    """Spawn cadence and gap placement."""

    def test_spawns_on_interval_ticks_at_right_edge(self, field):
        """Every interval tick spawns one pipe at spawn_x."""
        for tick in (0, 100, 200):
            assert field.maybe_spawn(tick, 100, 600, 28) is not None
        assert len(field) == 3
        assert all(o.x == field.spawn_x for o in field)

    def test_spawn_x_is_past_the_right_edge(self, field):
        """New pipes start lead_in past the world's right edge."""
        assert field.spawn_x == 400 + field.lead_in

    def test_no_spawn_between_intervals(self, field):
        """Off-interval ticks spawn nothing."""
        for tick in (1, 50, 99, 101):
            assert field.maybe_spawn(tick, 100, 600, 28) is None
        assert len(field) == 0

    def test_gap_drawn_from_safe_band(self, field, stub_rng):
        """gap_y is drawn between the top and safety margins."""
        field.maybe_spawn(100, 100, 600, 28)
        low, high = stub_rng.calls[0]
        assert low == 80
        assert high == 600 - 28 - 112

    def test_seeded_gap_stays_within_band(self):
        """A real RNG never places a gap outside the band."""
        field = ObstacleField(world_width=400, rng=random.Random(42))
        for tick in range(0, 5000, 100):
            field.maybe_spawn(tick, 100, 600, 28)
        low, high = field.gap_band(600, 28)
        assert all(low <= o.gap_y <= high for o in field)

    def test_whole_gap_clear_of_ground(self, field):
        """The full gap fits above the ground at both band ends."""
        low, high = field.gap_band(600, 28)
        assert low - field.gap_height / 2 >= 0
        assert high + field.gap_height / 2 < 600 - 28

    def test_empty_band_raises(self, field):
        """A world too short for the band is an error."""
        with pytest.raises(ValueError):
            field.maybe_spawn(0, 100, 200, 28)

    def test_spawn_order_is_preserved(self):
        """Obstacles stay in spawn order, oldest first."""
        rng = random.Random(3)
        field = ObstacleField(world_width=400, rng=rng)
        first = field.maybe_spawn(0, 100, 600, 28)
        field.tick(50)
        second = field.maybe_spawn(100, 100, 600, 28)
        assert field.obstacles == (first, second)
        assert first.x < second.x


class TestScrolling:
    """tick(): movement and pruning."""

    def test_tick_moves_every_obstacle_left(self, field):
        """tick() scrolls every pipe by the speed."""
        field.add(Obstacle(x=300, gap_y=250))
        field.add(Obstacle(x=200, gap_y=250))
        field.tick(1.6)
        assert [o.x for o in field] == pytest.approx([298.4, 198.4])

    def test_prunes_only_past_margin(self, field):
        """Pipes are dropped only once fully past the prune margin."""
        # after the tick: keep has its right edge at -19, drop at -21
        keep = Obstacle(x=-59.4, gap_y=250)
        drop = Obstacle(x=-61.4, gap_y=250)
        live = Obstacle(x=100, gap_y=250)
        for o in (drop, keep, live):
            field.add(o)
        field.tick(1.6)
        assert field.obstacles == (keep, live)

    def test_clear(self, field):
        """clear() empties the field."""
        field.add(Obstacle(x=10, gap_y=250))
        field.clear()
        assert len(field) == 0


class TestPassDetection:
    """detect_and_mark_passed()."""

    def test_marks_when_right_edge_behind_actor_left_edge(self, field):
        """A pipe whose right edge is behind the actor is passed."""
        # actor left edge = 60, right edge = x + 42
        field.add(Obstacle(x=17.9, gap_y=250))
        assert field.detect_and_mark_passed(72, 12) == 1
        assert field.obstacles[0].passed is True

    def test_touching_is_not_passed(self, field):
        """Edges touching exactly do not count as passed."""
        field.add(Obstacle(x=18, gap_y=250))
        assert field.detect_and_mark_passed(72, 12) == 0
        assert field.obstacles[0].passed is False

    def test_each_obstacle_counts_once(self, field):
        """A passed pipe is never counted again."""
        field.add(Obstacle(x=0, gap_y=250))
        assert field.detect_and_mark_passed(72, 12) == 1
        assert field.detect_and_mark_passed(72, 12) == 0
        field.tick(5)
        assert field.detect_and_mark_passed(72, 12) == 0
        assert field.obstacles[0].passed is True

    def test_counts_several_in_one_call(self, field):
        """The return value is the number newly passed."""
        field.add(Obstacle(x=-10, gap_y=250))
        field.add(Obstacle(x=5, gap_y=250))
        field.add(Obstacle(x=200, gap_y=250))
        assert field.detect_and_mark_passed(72, 12) == 2
        assert [o.passed for o in field] == [True, True, False]
