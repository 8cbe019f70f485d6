"""Defines the piece colors and the content of a single cell"""

import random
from enum import Enum, auto
from typing import Optional, Self


class Color(Enum):
    DARK = auto()
    LIGHT = auto()

    def opposite(self) -> Self:
        return Color.LIGHT if self == Color.DARK else Color.DARK

    @classmethod
    def random(cls, rng: random.Random) -> Self:
        """Used to decide which player gets to move first. Supply a seeded rng to make it reproducible."""
        return rng.choice([cls.DARK, cls.LIGHT])


# A cell is either empty (None) or holds a piece of one color
Cell = Optional[Color]

NOTATION_TO_COLOR: dict[str, Color] = {
    "d": Color.DARK,
    "l": Color.LIGHT,
}

COLOR_TO_NOTATION: dict[Color, str] = {value: key for key, value in NOTATION_TO_COLOR.items()}
