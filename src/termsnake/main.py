# main.py
import logging
import os
import sys

# pygame only drives the clock here; keep it off the display and audio.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame # type: ignore

from .config import CFG
from .food import has_room
from .game import GameState, new_game_state, step_game, draw_game
from .terminal import (
    AnsiScreen, TerminalError, decode_keys, raw_terminal, read_input, terminal_size,
)

logger = logging.getLogger(__name__)

def run(fd: int, screen: AnsiScreen) -> GameState:
    """Play until quit; returns the final state."""
    clock = pygame.time.Clock()
    area = terminal_size(fd)
    if not has_room(area):
        raise TerminalError(f"terminal {area.width}x{area.height} is too small to play")
    state = new_game_state(area, pygame.time.get_ticks())

    while True:
        # 1) input
        area = terminal_size(fd)
        data = read_input(fd)
        if data:
            state.last_input = data[-1]

        # 2) update
        if not step_game(state, decode_keys(data), area, pygame.time.get_ticks()):
            break

        # 3) render
        draw_game(screen, state)
        clock.tick(CFG.target_fps)  # movement gated inside step_game

    return state

def main() -> int:
    pygame.init()
    try:
        with raw_terminal() as fd:
            run(fd, AnsiScreen(sys.stdout))
    except OSError as e:
        # Terminal is back in cooked mode by now.
        logging.basicConfig(level=logging.WARNING)
        logger.error("termsnake aborted: %s", e)
        return 1
    finally:
        pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
