"""Players: either a human (moves supplied from outside) or an automated player with a difficulty level"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.shared_types import Difficulty, PlayerKind
from src.othello.board import Board
from src.othello.cell import Color

PLAYER_NAME_MAX_LENGTH = 20


@dataclass(frozen=True)
class Player:
    """
    Tagged variant: `kind` tells the Game whether to wait for a move from outside or to compute one itself.
    Only automated players carry a difficulty.
    """

    name: str
    color: Color
    kind: PlayerKind = PlayerKind.HUMAN
    difficulty: Optional[Difficulty] = None

    def __post_init__(self):
        # NOTE frozen dataclass: bypass __setattr__ to store the truncated name
        object.__setattr__(self, "name", self.name[:PLAYER_NAME_MAX_LENGTH])

        if self.kind == PlayerKind.AUTOMATED and self.difficulty is None:
            raise GameStateError("An automated player needs a difficulty.")
        if self.kind == PlayerKind.HUMAN and self.difficulty is not None:
            raise GameStateError("A human player cannot have a difficulty.")

    @classmethod
    def human(cls, name: str, color: Color) -> Self:
        return cls(name, color)

    @classmethod
    def automated(
        cls, color: Color, difficulty: Difficulty, name: Optional[str] = None
    ) -> Self:
        return cls(
            name or f"Computer ({color.name.lower()})",
            color,
            kind=PlayerKind.AUTOMATED,
            difficulty=difficulty,
        )

    @property
    def is_automated(self) -> bool:
        return self.kind == PlayerKind.AUTOMATED

    def score(self, board: Board) -> int:
        """Not stored: the number of cells holding this player's color"""
        return board.count(self.color)

    def can_play(self, board: Board) -> bool:
        return board.has_legal_move(self.color)

    def __str__(self) -> str:
        return self.name
