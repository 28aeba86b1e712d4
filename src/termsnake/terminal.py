# terminal.py
"""
Raw terminal I/O: raw mode, non-blocking keyboard polling, size queries
and an ANSI implementation of the Screen protocol.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import IO, Iterator, List
import logging
import os
import select
import sys
import termios
import tty

from .game import Command
from .geometry import PlayArea
from .render import RGB

logger = logging.getLogger(__name__)

# ----- ANSI escape codes -----
CSI          = "\x1b["
CLEAR_ALL    = CSI + "2J"
HIDE_CURSOR  = CSI + "?25l"
SHOW_CURSOR  = CSI + "?25h"
RESET_BG     = CSI + "49m"
RESET_ALL    = CSI + "0m"

# ----- Key bytes -> commands -----
KEYMAP = {
    ord("q"): Command.QUIT,
    0x03:     Command.QUIT,     # Ctrl-C, raw mode swallows SIGINT
    ord("a"): Command.GROW,
    ord("h"): Command.LEFT,
    ord("k"): Command.UP,
    ord("j"): Command.DOWN,
    ord("l"): Command.RIGHT,
}

READ_CHUNK = 1024


class TerminalError(OSError):
    """The terminal could not be set up or queried."""


def decode_keys(data: bytes) -> List[Command]:
    """Map raw input bytes to commands, dropping unknown keys."""
    return [KEYMAP[b] for b in data if b in KEYMAP]


def read_input(fd: int) -> bytes:
    """Drain every byte currently buffered on *fd* without blocking."""
    chunks = []
    while select.select([fd], [], [], 0)[0]:
        chunk = os.read(fd, READ_CHUNK)
        if not chunk:   # EOF
            break
        chunks.append(chunk)
    return b"".join(chunks)


def terminal_size(fd: int) -> PlayArea:
    try:
        size = os.get_terminal_size(fd)
    except OSError as e:
        raise TerminalError(f"cannot query terminal size: {e}") from e
    return PlayArea(size.columns, size.lines)


class AnsiScreen:
    """Screen backed by 24-bit ANSI escapes; output is buffered until flush()."""

    def __init__(self, stream: IO[str]):
        self.stream = stream
        self._buffer: List[str] = []

    def clear(self) -> None:
        self.goto(1, 1)
        self._buffer.append(CLEAR_ALL)

    def goto(self, x: int, y: int) -> None:
        self._buffer.append(f"{CSI}{y};{x}H")

    def set_fg(self, color: RGB) -> None:
        r, g, b = color
        self._buffer.append(f"{CSI}38;2;{r};{g};{b}m")

    def set_bg(self, color: RGB) -> None:
        r, g, b = color
        self._buffer.append(f"{CSI}48;2;{r};{g};{b}m")

    def reset_bg(self) -> None:
        self._buffer.append(RESET_BG)

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        frame = "".join(self._buffer)
        self._buffer.clear()
        self.stream.write(frame)
        self.stream.flush()


@contextmanager
def raw_terminal(stdin: IO = sys.stdin, stdout: IO[str] = sys.stdout) -> Iterator[int]:
    """
    Put *stdin* in raw mode for the duration of the block and yield its fd.
    The previous mode, cursor and colours are restored on exit.
    """
    try:
        fd = stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    except (OSError, ValueError, termios.error) as e:
        raise TerminalError(f"cannot enter raw mode: {e}") from e

    stdout.write(HIDE_CURSOR)
    stdout.flush()
    try:
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        stdout.write(f"{RESET_ALL}{CSI}1;1H{CLEAR_ALL}{SHOW_CURSOR}")
        stdout.flush()
        logger.debug("terminal restored")
