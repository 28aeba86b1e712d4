# geometry.py
from __future__ import annotations
from enum import Enum
from typing import Iterable, NamedTuple


class Direction(Enum):
    """Grid directions as (dx, dy); y grows downward."""
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Direction":
        """Raises ValueError when (dx, dy) is not a unit step."""
        return cls((dx, dy))


class Coordinate(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Coordinate":
        return Coordinate(self.x + direction.dx, self.y + direction.dy)

    def step_back(self, direction: Direction) -> "Coordinate":
        return Coordinate(self.x - direction.dx, self.y - direction.dy)


class PlayArea(NamedTuple):
    width: int
    height: int

    def contains(self, point: Coordinate) -> bool:
        return 1 <= point.x <= self.width and 1 <= point.y <= self.height


# Never inside any play area, so placement loops sample at least once.
SENTINEL = Coordinate(0, 0)


def collides(point: Coordinate, area: PlayArea, segments: Iterable[Coordinate]) -> bool:
    """True if *point* is off the play area or on one of *segments*."""
    if not area.contains(point):
        return True
    return point in segments
