"""Unit tests for /src/othello/strategy.py"""

import random
from unittest.mock import Mock

import pytest

from src.core.exceptions import NoLegalMoveError
from src.core.shared_types import Difficulty
from src.othello.board import Board
from src.othello.cell import Color
from src.othello.position import Position
from src.othello.strategy import STRATEGIES, greedy_move, random_move, select_move

# Dark's only move is A3, capturing the light piece on A2
SINGLE_MOVE_NOTATION = "dl6/8/8/8/8/8/8/8"
# Dark can play A3 (flips 1) or H5 (flips 3)
ONE_OR_THREE_NOTATION = "dl6/8/8/8/8/8/8/dlll4"
# Dark can play A3 or H3, each flipping 1
TIED_NOTATION = "dl6/8/8/8/8/8/8/dl6"


def test_every_difficulty_has_a_strategy() -> None:
    assert set(STRATEGIES.keys()) == set(Difficulty)


# -- EASY --
@pytest.mark.parametrize("seed", range(5))
def test_easy_single_move(seed: int) -> None:
    """Only one legal move: the random source does not matter"""
    board = Board.from_notation(SINGLE_MOVE_NOTATION)
    move = select_move(board, Color.DARK, Difficulty.EASY, random.Random(seed))
    assert move == Position(2, 0)


def test_easy_single_move_does_not_consult_rng() -> None:
    board = Board.from_notation(SINGLE_MOVE_NOTATION)
    rng = Mock()
    move = select_move(board, Color.DARK, Difficulty.EASY, rng)
    assert move == Position(2, 0)
    rng.choice.assert_not_called()


def test_easy_picks_from_sorted_legal_moves() -> None:
    """The rng chooses among the legal moves in row-major order"""
    board = Board.starting()
    rng = Mock()
    rng.choice.side_effect = lambda options: options[-1]

    move = select_move(board, Color.DARK, Difficulty.EASY, rng)

    expected_options = [
        Position.from_notation(notation) for notation in ["C4", "D3", "E6", "F5"]
    ]
    rng.choice.assert_called_once_with(expected_options)
    assert move == Position.from_notation("F5")


def test_easy_is_reproducible_with_seed() -> None:
    board = Board.starting()
    first = select_move(board, Color.DARK, Difficulty.EASY, random.Random(1234))
    second = select_move(board, Color.DARK, Difficulty.EASY, random.Random(1234))
    assert first == second
    assert first in board.legal_moves(Color.DARK)


def test_random_move_returns_rng_choice() -> None:
    board = Board.starting()
    options = [Position(3, 2), Position(2, 3)]
    rng = Mock()
    rng.choice.return_value = Position(2, 3)
    assert random_move(board, Color.DARK, options, rng) == Position(2, 3)


# -- NORMAL --
def test_normal_prefers_most_captures() -> None:
    board = Board.from_notation(ONE_OR_THREE_NOTATION)
    assert board.legal_moves(Color.DARK) == {Position(2, 0), Position(4, 7)}

    move = select_move(board, Color.DARK, Difficulty.NORMAL, random.Random())
    assert move == Position(4, 7)


def test_normal_tie_goes_to_lowest_position() -> None:
    board = Board.from_notation(TIED_NOTATION)
    move = select_move(board, Color.DARK, Difficulty.NORMAL, random.Random())
    assert move == Position(2, 0)


def test_normal_in_starting_position() -> None:
    """All four opening moves capture a single piece: C4 comes first in row-major order"""
    board = Board.starting()
    move = select_move(board, Color.DARK, Difficulty.NORMAL, random.Random())
    assert move == Position.from_notation("C4")


def test_normal_does_not_consult_rng() -> None:
    board = Board.from_notation(ONE_OR_THREE_NOTATION)
    rng = Mock()
    _ = select_move(board, Color.DARK, Difficulty.NORMAL, rng)
    rng.choice.assert_not_called()


def test_greedy_move_keeps_first_maximum() -> None:
    board = Board.from_notation(TIED_NOTATION)
    options = [Position(2, 7), Position(2, 0)]
    assert greedy_move(board, Color.DARK, options, random.Random()) == Position(2, 7)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_selection_does_not_modify_board(difficulty: Difficulty) -> None:
    board = Board.from_notation(ONE_OR_THREE_NOTATION)
    _ = select_move(board, Color.DARK, difficulty, random.Random(7))
    assert board.to_notation() == ONE_OR_THREE_NOTATION


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_no_legal_move(difficulty: Difficulty) -> None:
    board = Board.from_notation(SINGLE_MOVE_NOTATION)
    with pytest.raises(NoLegalMoveError):
        _ = select_move(board, Color.LIGHT, difficulty, random.Random())
