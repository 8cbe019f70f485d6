"""The Game board holds the pieces. Which cells are playable is delegated to the capture rules in moves.py"""

import string
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidBoardError, OutOfBoundsError
from src.othello.cell import COLOR_TO_NOTATION, NOTATION_TO_COLOR, Cell, Color
from src.othello.moves import is_legal
from src.othello.position import BOARD_SIZE, Position, all_positions

STARTING_NOTATION = "8/8/8/3ld3/3dl3/8/8/8"
EMPTY_NOTATION = "/".join(["8"] * BOARD_SIZE)


@dataclass
class Board:
    cells: dict[Position, Cell]

    @classmethod
    def starting(cls) -> Self:
        """Standard opening: two pieces of each color placed diagonally in the center"""
        return cls.from_notation(STARTING_NOTATION)

    @classmethod
    def empty(cls) -> Self:
        return cls.from_notation(EMPTY_NOTATION)

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Construct a board using a FEN-like string.

        Rows are separated by slashes, starting with row A (top) and ending with row H (bottom).
        Within a row, the first character is column 1.
        * 'd' is a dark piece, 'l' a light piece
        * a digit denotes the amount of empty cells after each other

        ex. the starting position:
        8/8/8/3ld3/3dl3/8/8/8
        means rows A-C are empty, D4 is light, D5 is dark, E4 is dark, E5 is light.
        """
        rows = notation.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Board notation needs {BOARD_SIZE} rows, got {len(rows)}: {notation!r}"
            )

        cells: dict[Position, Cell] = {}
        for row, row_notation in enumerate(rows):
            column = 0
            for character in row_notation:
                if character in string.digits:
                    for _ in range(int(character)):
                        cells[Position(column, row)] = None
                        column += 1
                elif character.lower() in NOTATION_TO_COLOR:
                    cells[Position(column, row)] = NOTATION_TO_COLOR[character.lower()]
                    column += 1
                else:
                    raise InvalidBoardError(
                        f"Unknown character {character!r} in board notation {notation!r}"
                    )

            # make sure you are creating a correctly sized board
            if column != BOARD_SIZE:
                raise InvalidBoardError(
                    f"Row {row + 1} of {notation!r} covers {column} cells instead of {BOARD_SIZE}."
                )
        return cls(cells)

    def to_notation(self) -> str:
        return "/".join(self._row_to_notation(row) for row in range(BOARD_SIZE))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for column in range(BOARD_SIZE):
            cell = self.cell_at(Position(column, row))
            if cell is None:
                empty_count += 1
                continue

            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(COLOR_TO_NOTATION[cell])

        # an entirely empty row still gets its number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    # --- QUERIES ---
    def cell_at(self, position: Position) -> Cell:
        self._assert_on_board(position)
        return self.cells[position]

    def is_empty(self, position: Position) -> bool:
        return self.cell_at(position) is None

    def legal_moves(self, color: Color) -> set[Position]:
        """Every empty cell where a `color` piece would capture at least one opposing piece"""
        return {
            position
            for position in self.empty_cells()
            if is_legal(self, position, color)
        }

    def has_legal_move(self, color: Color) -> bool:
        return any(is_legal(self, position, color) for position in self.empty_cells())

    def empty_cells(self) -> list[Position]:
        return [position for position in all_positions() if self.cells[position] is None]

    def locate_color(self, color: Color) -> list[Position]:
        return [position for position, cell in self.cells.items() if cell == color]

    def count(self, color: Color) -> int:
        return len(self.locate_color(color))

    def scores(self) -> dict[Color, int]:
        return {color: self.count(color) for color in Color}

    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells.values() if cell is not None)

    def is_full(self) -> bool:
        return self.occupied_count() == BOARD_SIZE * BOARD_SIZE

    # --- MUTATION ---
    def place(self, position: Position, color: Color) -> None:
        """Low-level write. Legality is checked by the Game before calling this."""
        self._assert_on_board(position)
        self.cells[position] = color

    def _assert_on_board(self, position: Position) -> None:
        if not position.is_within_bounds():
            raise OutOfBoundsError(f"{position} is not on the board.")
