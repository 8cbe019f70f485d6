"""
A position (cell coordinate) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from src.core.exceptions import InvalidNotationError, OutOfBoundsError

# Othello is played on a fixed 8x8 grid
BOARD_SIZE = 8

# Rows are labelled with letters, columns with numbers (ex. 'D3': 4th row, 3rd column)
ROW_LABELS = "ABCDEFGH"


@dataclass(frozen=True)
class Position:
    column: int
    row: int

    @classmethod
    def from_notation(cls, text: str) -> Position:
        """'A1' - 'H8' get converted to (0,0) - (7,7). Lower case letters are accepted as well."""
        text = text.strip().upper()
        if len(text) != 2 or not (text[0].isalpha() and text[1] in string.digits):
            raise InvalidNotationError(f"Cannot interpret {text!r} as a position.")

        row = ord(text[0]) - ord("A")
        column = int(text[1]) - 1
        position = cls(column, row)
        if not position.is_within_bounds():
            raise OutOfBoundsError(f"Position {text!r} is not on the board.")
        return position

    def to_notation(self) -> str:
        return f"{ROW_LABELS[self.row]}{self.column + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.column < BOARD_SIZE) and (0 <= self.row < BOARD_SIZE)

    def shifted(self, d_column: int, d_row: int) -> Position:
        """Neighbour in the given direction. Can end up off the board: check is_within_bounds() before use."""
        return Position(self.column + d_column, self.row + d_row)

    def sort_key(self) -> tuple[int, int]:
        """Row-major order"""
        return (self.row, self.column)


def all_positions() -> list[Position]:
    """Every cell of the board in row-major order"""
    return [Position(column, row) for row in range(BOARD_SIZE) for column in range(BOARD_SIZE)]
