"""
Move selection for automated players

Key idea: strategy pattern. Every difficulty maps onto a function picking one of the legal moves.
"""

import random
from typing import Callable

from src.core.exceptions import NoLegalMoveError
from src.core.shared_types import Difficulty
from src.othello.board import Board
from src.othello.cell import Color
from src.othello.moves import evaluate
from src.othello.position import Position

StrategyFn = Callable[[Board, Color, list[Position], random.Random], Position]


def random_move(
    board: Board, color: Color, legal_moves: list[Position], rng: random.Random
) -> Position:
    """Easy: any legal move, picked uniformly."""
    return rng.choice(legal_moves)


def greedy_move(
    board: Board, color: Color, legal_moves: list[Position], rng: random.Random
) -> Position:
    """
    Normal: the move flipping the most opposing pieces this turn.
    ---

    legal_moves come in row-major order and max() keeps the first maximum, so ties go to the lowest position.
    """
    return max(legal_moves, key=lambda position: len(evaluate(board, position, color)))


STRATEGIES: dict[Difficulty, StrategyFn] = {
    Difficulty.EASY: random_move,
    Difficulty.NORMAL: greedy_move,
}


def select_move(
    board: Board, color: Color, difficulty: Difficulty, rng: random.Random
) -> Position:
    """Pick a move for the automated player. Caller must make sure the color has a legal move."""
    legal_moves = sorted(board.legal_moves(color), key=Position.sort_key)
    if not legal_moves:
        raise NoLegalMoveError(f"No legal move available for {color.name.lower()}.")

    # a single option leaves nothing to decide
    if len(legal_moves) == 1:
        return legal_moves[0]

    strategy = STRATEGIES[difficulty]
    return strategy(board, color, legal_moves, rng)
