# render.py
"""Drawing capabilities the game needs from whatever owns the display."""
from __future__ import annotations
from typing import Protocol, Tuple

RGB = Tuple[int, int, int]


class Screen(Protocol):
    def clear(self) -> None: ...
    def goto(self, x: int, y: int) -> None: ...
    def set_fg(self, color: RGB) -> None: ...
    def set_bg(self, color: RGB) -> None: ...
    def reset_bg(self) -> None: ...
    def write(self, text: str) -> None: ...
    def flush(self) -> None: ...


class Renderable(Protocol):
    def render(self, screen: Screen) -> None: ...
