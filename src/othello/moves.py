"""
Capture rules (the "move evaluator")

Key idea: raycasting. From the target cell we walk along each of the 8 compass directions.
Opposing pieces are collected until we hit one of our own pieces (the run is captured) or
an empty cell / the edge of the board (nothing is captured in that direction).

The Board asks this module which cells are playable, and the Game uses it to flip pieces.
"""

from typing import Optional, Protocol

from src.core.exceptions import OutOfBoundsError
from src.othello.cell import Color
from src.othello.position import Position

Vector = tuple[int, int]

# (d_column, d_row): N, NE, E, SE, S, SW, W, NW
DIRECTIONS: tuple[Vector, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class Board(Protocol):
    """Just the parts the capture rules need"""

    def cell_at(self, position: Position) -> Optional[Color]: ...
    def is_empty(self, position: Position) -> bool: ...


def capture_run(
    board: Board, position: Position, color: Color, direction: Vector
) -> list[Position]:
    """
    Opposing pieces captured along a single direction.
    ---

    Empty list if the run is not closed off by a piece of `color`.
    """
    opponent_color = color.opposite()
    run: list[Position] = []
    current = position
    while True:
        current = current.shifted(*direction)
        if not current.is_within_bounds():
            return []

        cell = board.cell_at(current)
        if cell == opponent_color:
            run.append(current)
            continue

        if cell == color:
            return run

        # empty cell interrupts the run
        return []


def evaluate(board: Board, position: Position, color: Color) -> set[Position]:
    """
    Capture set of placing a `color` piece on `position`.
    ---

    The union of the runs in all 8 directions. Empty when the cell is occupied or nothing gets captured.
    Does not modify the board.
    """
    if not position.is_within_bounds():
        raise OutOfBoundsError(f"{position} is not on the board.")

    if not board.is_empty(position):
        return set()

    captures: set[Position] = set()
    for direction in DIRECTIONS:
        captures.update(capture_run(board, position, color, direction))
    return captures


def is_legal(board: Board, position: Position, color: Color) -> bool:
    """A move is legal if the cell is empty and at least one opposing piece gets captured."""
    return bool(evaluate(board, position, color))
