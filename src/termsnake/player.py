# player.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Optional
import logging

from .config import BODY_COLOR, CELL_GLYPH, HEAD_COLOR
from .geometry import Coordinate, Direction, PlayArea, collides
from .render import Screen

logger = logging.getLogger(__name__)


class NonAdjacentSegmentsError(ValueError):
    """The last two body segments are not one unit step apart."""

    def __init__(self, last: Coordinate, second_last: Coordinate):
        super().__init__(f"segments {second_last} and {last} are not adjacent")
        self.last = last
        self.second_last = second_last


class Player:
    """
    The snake: a heading plus a head-first deque of segments.

    Collisions never raise. A blocked move or a blocked growth is simply
    dropped and the method returns False.
    """

    def __init__(
        self,
        segments: Optional[Iterable[Coordinate]] = None,
        heading: Direction = Direction.RIGHT,
        length: int = 4,
    ):
        if segments is None:
            # Horizontal line on the top row, head at x == length.
            segments = [Coordinate(x, 1) for x in range(length, 0, -1)]
        self.segments: Deque[Coordinate] = deque(Coordinate(*s) for s in segments)
        if not self.segments:
            raise ValueError("player needs at least 1 segment")
        self.heading = heading

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, point: object) -> bool:
        return point in self.segments

    @property
    def head(self) -> Coordinate:
        return self.segments[0]

    @property
    def tail(self) -> Coordinate:
        return self.segments[-1]

    def collides(self, point: Coordinate, area: PlayArea) -> bool:
        return collides(point, area, self.segments)

    def change_direction(self, new_heading: Direction) -> None:
        """Turn, unless *new_heading* would reverse onto the body."""
        if new_heading is self.heading.opposite:
            return
        self.heading = new_heading

    def update_position(self, area: PlayArea) -> bool:
        new_head = self.head.step(self.heading)
        if self.collides(new_head, area):
            logger.debug("move to %s blocked", new_head)
            return False

        self.segments.appendleft(new_head)
        self.segments.pop()
        return True

    def tail_direction(self) -> Direction:
        """Direction the tail is travelling in (heading for a 1-cell body)."""
        if len(self.segments) < 2:
            return self.heading

        last = self.segments[-1]
        second_last = self.segments[-2]
        try:
            return Direction.from_delta(second_last.x - last.x, second_last.y - last.y)
        except ValueError:
            raise NonAdjacentSegmentsError(last, second_last) from None

    def elongate(self, area: PlayArea) -> bool:
        new_tail = self.tail.step_back(self.tail_direction())
        if self.collides(new_tail, area):
            logger.debug("growth to %s blocked", new_tail)
            return False

        self.segments.append(new_tail)
        return True

    def render(self, screen: Screen) -> None:
        for index, (x, y) in enumerate(self.segments):
            screen.goto(x, y)
            screen.set_bg(HEAD_COLOR if index == 0 else BODY_COLOR)
            screen.write(CELL_GLYPH)
            screen.reset_bg()
