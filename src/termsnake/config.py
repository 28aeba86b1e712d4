from dataclasses import dataclass
from typing import Optional

# ----- Colors (RGB) -----
HEAD_COLOR = (0, 255, 0)
BODY_COLOR = (255, 255, 255)
FOOD_BG    = (255, 0, 0)
FOOD_FG    = (0, 0, 0)

# ----- Glyphs -----
CELL_GLYPH = " "
FOOD_GLYPH = "'"

# ----- Tunables -----
@dataclass
class Config:
    target_fps: int = 60
    move_every_ms: int = 150
    food_count: int = 4
    initial_length: int = 4
    seed: Optional[int] = None

CFG = Config()
