"""Tests for coordinates, directions and the collision predicate."""

import pytest

from termsnake.geometry import SENTINEL, Coordinate, Direction, PlayArea, collides


class TestDirection:
    @pytest.mark.parametrize("a, b", [
        (Direction.UP, Direction.DOWN),
        (Direction.LEFT, Direction.RIGHT),
    ])
    def test_opposites(self, a, b):
        assert a.opposite is b
        assert b.opposite is a

    def test_from_delta(self):
        assert Direction.from_delta(0, -1) is Direction.UP
        assert Direction.from_delta(1, 0) is Direction.RIGHT

    def test_from_delta_rejects_non_unit(self):
        with pytest.raises(ValueError):
            Direction.from_delta(2, 0)


class TestCoordinate:
    def test_value_equality(self):
        assert Coordinate(3, 4) == Coordinate(3, 4)
        assert Coordinate(3, 4) == (3, 4)

    def test_step_and_step_back(self):
        c = Coordinate(5, 5)
        assert c.step(Direction.UP) == (5, 4)
        assert c.step(Direction.RIGHT) == (6, 5)
        assert c.step_back(Direction.RIGHT) == (4, 5)


class TestCollides:
    area = PlayArea(10, 5)

    @pytest.mark.parametrize("point", [(0, 1), (1, 0), (11, 1), (1, 6), (-1, -1)])
    def test_outside_is_wall(self, point):
        assert collides(Coordinate(*point), self.area, [])

    @pytest.mark.parametrize("point", [(1, 1), (10, 1), (1, 5), (10, 5)])
    def test_edges_are_inside(self, point):
        assert not collides(Coordinate(*point), self.area, [])

    def test_segment_hit(self):
        segments = [Coordinate(3, 3), Coordinate(2, 3)]
        assert collides(Coordinate(2, 3), self.area, segments)
        assert not collides(Coordinate(4, 3), self.area, segments)

    def test_sentinel_always_collides(self):
        assert collides(SENTINEL, PlayArea(1000, 1000), [])
