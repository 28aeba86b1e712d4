# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional
import logging
import random

from .config import BODY_COLOR, CFG
from .food import Food
from .geometry import Direction, PlayArea
from .player import Player
from .render import Renderable, Screen

logger = logging.getLogger(__name__)


class Command(Enum):
    QUIT  = "quit"
    LEFT  = "left"
    UP    = "up"
    DOWN  = "down"
    RIGHT = "right"
    GROW  = "grow"


TURNS = {
    Command.LEFT:  Direction.LEFT,
    Command.UP:    Direction.UP,
    Command.DOWN:  Direction.DOWN,
    Command.RIGHT: Direction.RIGHT,
}

# ---------- State ----------
@dataclass
class GameState:
    player: Player
    foods: List[Food]
    area: PlayArea
    last_move_ms: int              # ms timestamp of last step
    rng: random.Random = field(default_factory=random.Random)
    running: bool = True
    last_input: Optional[int] = None

def new_game_state(area: PlayArea, now_ms: int, seed: Optional[int] = CFG.seed) -> GameState:
    rng = random.Random(seed)
    player = Player(length=CFG.initial_length)
    foods = [Food.spawn(area, player, rng) for _ in range(CFG.food_count)]
    return GameState(
        player=player,
        foods=foods,
        area=area,
        last_move_ms=now_ms,
        rng=rng,
    )

# ---------- Input / Update / Draw ----------
def apply_command(state: GameState, command: Command) -> None:
    if command is Command.QUIT:
        state.running = False
    elif command is Command.GROW:
        state.player.elongate(state.area)
    else:
        state.player.change_direction(TURNS[command])

def step_game(state: GameState, commands: Iterable[Command], area: PlayArea, now_ms: int) -> bool:
    """
    Advance the game by one tick.
    - Commands are applied in order; QUIT ends the tick immediately.
    - The player moves at most once, and only every CFG.move_every_ms.
    - Every food is then checked against the head, in list order.
    Returns False once the game has been quit.
    """
    if area != state.area:
        logger.debug("play area resized %s -> %s", state.area, area)
    state.area = area

    for command in commands:
        apply_command(state, command)
        if not state.running:
            return False

    if now_ms - state.last_move_ms > CFG.move_every_ms:
        state.last_move_ms = now_ms
        state.player.update_position(area)

    for food in state.foods:
        food.check_eaten(area, state.player, state.rng)

    return state.running

def draw_game(screen: Screen, state: GameState) -> None:
    screen.clear()

    # status row first, so entities on the bottom row draw over it
    if state.last_input is not None:
        screen.goto(2, state.area.height)
        screen.set_fg(BODY_COLOR)
        screen.write(str(state.last_input))

    renderables: List[Renderable] = [*state.foods, state.player]
    for item in renderables:
        item.render(screen)

    screen.goto(1, state.area.height)
    screen.flush()
