"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the rules required to play a turn -->
whose turn it is, applying a move (with its captures), forced passes and detecting the end of the game.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Difficulty, PlayerKind
from src.othello.board import Board
from src.othello.cell import Color
from src.othello.moves import evaluate
from src.othello.player import Player
from src.othello.position import Position
from src.othello.strategy import select_move

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[Color, Player]
    turn: Color
    moves: list[Position]
    status: Status
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    @classmethod
    def new_game(
        cls,
        player_dark: Player,
        player_light: Player,
        board: Optional[Board] = None,
        starting_color: Optional[Color] = None,
        rng: Optional[random.Random] = None,
    ) -> Self:
        """
        Start a game between two players of opposite colors.
        ---

        * board: defaults to the standard starting position
        * starting_color: if not given, picked at random (supply a seeded rng to make this reproducible)
        """
        if player_dark.color == player_light.color:
            raise GameStateError(
                f"Cannot create new game. Both players use {player_dark.color.name.lower()} pieces."
            )

        rng = rng or random.Random()
        first_color = starting_color or Color.random(rng)
        game = cls(
            board=board or Board.starting(),
            players={player_dark.color: player_dark, player_light.color: player_light},
            turn=first_color,
            moves=[],
            status=Status.IN_PROGRESS,
            rng=rng,
        )
        logger.info(
            "New game: %s (dark) vs %s (light), %s to move",
            game.players[Color.DARK],
            game.players[Color.LIGHT],
            first_color.name.lower(),
        )
        return game

    @classmethod
    def from_model(cls, model: GameModel, rng: Optional[random.Random] = None) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )

        turn_name = model.turn.upper()
        if turn_name not in Color.__members__:
            raise GameStateError(f"Invalid color to move: {model.turn!r}")

        missing = [
            color.name.lower()
            for color in Color
            if color.name.lower() not in model.registered_players
        ]
        if missing:
            raise GameStateError(f"Game is missing a player for: {','.join(missing)}")

        # create the Game
        board = Board.from_notation(model.board)
        players = {
            color: cls._player_from_model(model, color) for color in Color
        }
        moves = [Position.from_notation(move) for move in model.moves]
        return cls(
            board=board,
            players=players,
            turn=Color[turn_name],
            moves=moves,
            status=Status[status_name],
            rng=rng or random.Random(),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_notation(),
            registered_players={
                color.name.lower(): player.name for color, player in self.players.items()
            },
            automated_players={
                color.name.lower(): player.difficulty.value
                for color, player in self.players.items()
                if player.difficulty is not None
            },
            turn=self.turn.name.lower(),
            moves=[move.to_notation() for move in self.moves],
            status=self.status.name.lower().replace("_", " "),
        )

    # --- QUERIES ---
    def current_player(self) -> Player:
        return self.players[self.turn]

    def player(self, color: Color) -> Player:
        return self.players[color]

    def legal_moves_for(self, color: Color) -> set[Position]:
        return self.board.legal_moves(color)

    def score(self, color: Color) -> int:
        return self.board.count(color)

    def scores(self) -> dict[Color, int]:
        return self.board.scores()

    def is_finished(self) -> bool:
        return self.status == Status.FINISHED

    def last_move_played(self) -> Optional[Position]:
        return self.moves[-1] if self.moves else None

    def winner(self) -> Optional[Player]:
        """
        The player with the most pieces on the board.
        None means the game ended in a draw (equal counts).
        """
        if not self.is_finished():
            raise GameStateError("Game is not finished yet. There is no winner.")

        dark, light = self.score(Color.DARK), self.score(Color.LIGHT)
        if dark == light:
            return None
        return self.players[Color.DARK] if dark > light else self.players[Color.LIGHT]

    def is_draw(self) -> bool:
        return self.is_finished() and self.winner() is None

    # --- MUTATIONS ---
    def apply(self, position: Position) -> bool:
        """
        Attempt to play `position` for the player whose turn it is.
        ----

        Returns False (and leaves the game untouched) if the game is over, the cell is occupied, or nothing would be captured.
        The caller is expected to ask for another position.
        A position off the board raises OutOfBoundsError.

        NOTE: does not pass the turn. Call advance_turn() afterwards.
        """
        if self.status != Status.IN_PROGRESS:
            return False

        captures = evaluate(self.board, position, self.turn)
        if not captures:
            logger.debug(
                "Rejected %s for %s: not a legal move",
                position.to_notation(),
                self.turn.name.lower(),
            )
            return False

        self._update_board(position, captures)
        self._update_moves(position)
        logger.debug(
            "%s played %s, capturing %d piece(s)",
            self.current_player(),
            position.to_notation(),
            len(captures),
        )
        return True

    def advance_turn(self) -> None:
        """
        Pass the turn to the opponent.
        ----

        1. Opponent can move? --> opponent's turn
        2. Opponent cannot move, but the current player can --> forced pass, current player moves again
        3. Nobody can move --> game over
        """
        if self.status != Status.IN_PROGRESS:
            return

        opponent_color = self.turn.opposite()
        if self.board.has_legal_move(opponent_color):
            self.turn = opponent_color
        elif self.board.has_legal_move(self.turn):
            logger.info(
                "%s has no playable move and passes", self.players[opponent_color]
            )
        else:
            self._change_status(Status.FINISHED)
            logger.info("Game over. Scores: %s", self._format_scores())

    def play_automated_turn(self) -> Optional[Position]:
        """
        Let the automated player whose turn it is pick and play a move.
        ----

        Returns the position played, or None if that player has no legal move.
        NOTE: like apply(), this does not pass the turn.
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        player = self.current_player()
        if player.kind != PlayerKind.AUTOMATED:
            raise GameStateError(
                f"It is the turn of {player}, who is not an automated player."
            )

        if not player.can_play(self.board):
            return None

        if player.difficulty is None:
            raise GameStateError(f"Automated player {player} has no difficulty.")
        position = select_move(self.board, player.color, player.difficulty, self.rng)
        self.apply(position)
        return position

    # -- PRIVATE HELPERS ---
    @staticmethod
    def _player_from_model(model: GameModel, color: Color) -> Player:
        color_name = color.name.lower()
        name = model.registered_players[color_name]
        difficulty = model.automated_players.get(color_name)
        if difficulty is None:
            return Player.human(name, color)
        if difficulty not in {level.value for level in Difficulty}:
            raise GameStateError(f"Invalid difficulty for {color_name}: {difficulty!r}")
        return Player.automated(color, Difficulty(difficulty), name=name)

    def _update_board(self, position: Position, captures: set[Position]) -> None:
        """Place the new piece and flip every captured piece to the color of the player to move."""
        self.board.place(position, self.turn)
        for captured in captures:
            self.board.place(captured, self.turn)

    def _update_moves(self, position: Position) -> None:
        self.moves.append(position)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _format_scores(self) -> str:
        return ", ".join(
            f"{self.players[color]} ({color.name.lower()}): {count}"
            for color, count in self.scores().items()
        )
