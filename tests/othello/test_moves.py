"""Unit tests for /src/othello/moves.py"""

import pytest

from src.core.exceptions import OutOfBoundsError
from src.othello.board import Board
from src.othello.cell import Color
from src.othello.moves import DIRECTIONS, capture_run, evaluate, is_legal
from src.othello.position import Position

# Dark playing the corner A1 captures along three directions:
# east (B1, C1 closed by D1), south (A2 closed by A3) and diagonally (B2 closed by C3)
THREE_DIRECTIONS_NOTATION = "1lld4/ll6/d1d5/8/8/8/8/8"


def test_directions() -> None:
    """8 unique compass directions, all unit steps"""
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS
    assert all(abs(dc) <= 1 and abs(dr) <= 1 for dc, dr in DIRECTIONS)


def test_capture_in_starting_position() -> None:
    board = Board.starting()
    assert evaluate(board, Position.from_notation("C4"), Color.DARK) == {
        Position(3, 3)
    }
    assert evaluate(board, Position.from_notation("E3"), Color.LIGHT) == {
        Position(3, 4)
    }


def test_capture_in_multiple_directions() -> None:
    board = Board.from_notation(THREE_DIRECTIONS_NOTATION)
    captures = evaluate(board, Position(0, 0), Color.DARK)
    assert captures == {Position(1, 0), Position(2, 0), Position(0, 1), Position(1, 1)}


def test_capture_run_single_direction() -> None:
    board = Board.from_notation(THREE_DIRECTIONS_NOTATION)
    assert capture_run(board, Position(0, 0), Color.DARK, (1, 0)) == [
        Position(1, 0),
        Position(2, 0),
    ]
    assert capture_run(board, Position(0, 0), Color.DARK, (0, 1)) == [Position(0, 1)]
    assert capture_run(board, Position(0, 0), Color.DARK, (1, 1)) == [Position(1, 1)]


def test_capture_run_hits_edge_immediately() -> None:
    board = Board.from_notation(THREE_DIRECTIONS_NOTATION)
    assert capture_run(board, Position(0, 0), Color.DARK, (0, -1)) == []
    assert capture_run(board, Position(0, 0), Color.DARK, (-1, 0)) == []


def test_run_interrupted_by_empty_cell() -> None:
    """B1 and C1 are light, but D1 is empty before the dark piece on E1"""
    board = Board.from_notation("1ll1d3/8/8/8/8/8/8/8")
    assert capture_run(board, Position(0, 0), Color.DARK, (1, 0)) == []
    assert evaluate(board, Position(0, 0), Color.DARK) == set()


def test_run_reaching_the_edge() -> None:
    """Opposing pieces all the way to the edge are not captured"""
    board = Board.from_notation("1lllllll/8/8/8/8/8/8/8")
    assert evaluate(board, Position(0, 0), Color.DARK) == set()
    assert not is_legal(board, Position(0, 0), Color.DARK)


def test_own_piece_adjacent_captures_nothing() -> None:
    board = Board.from_notation("1d6/8/8/8/8/8/8/8")
    assert capture_run(board, Position(0, 0), Color.DARK, (1, 0)) == []


def test_occupied_cell_captures_nothing() -> None:
    board = Board.starting()
    for color in Color:
        assert evaluate(board, Position(3, 3), color) == set()
        assert not is_legal(board, Position(3, 3), color)


def test_no_neighbours_captures_nothing() -> None:
    board = Board.starting()
    assert evaluate(board, Position(0, 0), Color.DARK) == set()


def test_evaluate_does_not_modify_board() -> None:
    board = Board.from_notation(THREE_DIRECTIONS_NOTATION)
    _ = evaluate(board, Position(0, 0), Color.DARK)
    assert board.to_notation() == THREE_DIRECTIONS_NOTATION


@pytest.mark.parametrize("notation", ["C4", "D3", "E6", "F5"])
def test_is_legal(notation: str) -> None:
    board = Board.starting()
    assert is_legal(board, Position.from_notation(notation), Color.DARK)
    assert not is_legal(board, Position.from_notation(notation), Color.LIGHT)


def test_evaluate_out_of_bounds() -> None:
    board = Board.starting()
    with pytest.raises(OutOfBoundsError):
        _ = evaluate(board, Position(-1, 3), Color.DARK)
