# food.py
from __future__ import annotations
from typing import Iterable
import logging
import random

from .config import FOOD_BG, FOOD_FG, FOOD_GLYPH
from .geometry import SENTINEL, Coordinate, PlayArea, collides
from .player import Player
from .render import Screen

logger = logging.getLogger(__name__)


def has_room(area: PlayArea) -> bool:
    """True if *area* has at least one cell food may use."""
    return area.width >= 2 and area.height >= 2


def spawn_location(area: PlayArea, segments: Iterable[Coordinate], rng: random.Random) -> Coordinate:
    """
    Sample a free cell in [1, width-1] x [1, height-1].

    The last column and row are never used. There is no retry cap, so a
    fully occupied area never returns.
    """
    if not has_room(area):
        raise ValueError(f"play area {area.width}x{area.height} has no room for food")

    candidate = SENTINEL
    while collides(candidate, area, segments):
        candidate = Coordinate(rng.randrange(1, area.width), rng.randrange(1, area.height))
    return candidate


class Food:
    def __init__(self, location: Coordinate):
        self.location = location

    def __repr__(self) -> str:
        return f"Food({self.location!r})"

    @classmethod
    def spawn(cls, area: PlayArea, player: Player, rng: random.Random) -> "Food":
        return cls(spawn_location(area, player.segments, rng))

    def check_eaten(self, area: PlayArea, player: Player, rng: random.Random) -> bool:
        """
        Grow the player and relocate if its head is on this food.

        While the area is too small to hold food the food stays put and
        is not eaten.
        """
        if player.head != self.location:
            return False
        if not has_room(area):
            logger.debug("no room to relocate food at %s", self.location)
            return False

        eaten_at = self.location
        player.elongate(area)
        self.location = spawn_location(area, player.segments, rng)
        logger.debug("food at %s eaten, moved to %s", eaten_at, self.location)
        return True

    def render(self, screen: Screen) -> None:
        screen.goto(*self.location)
        screen.set_bg(FOOD_BG)
        screen.set_fg(FOOD_FG)
        screen.write(FOOD_GLYPH)
        screen.reset_bg()
