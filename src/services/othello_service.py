"""Orchestration of communication from API models to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    AutomatedMoveRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, Difficulty, Status
from src.db.repository import GameRepository
from src.othello.board import Board
from src.othello.cell import Color as PieceColor
from src.othello.game import Game
from src.othello.player import PLAYER_NAME_MAX_LENGTH, Player
from src.othello.position import Position

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(
        self, repository: GameRepository, rng: Optional[random.Random] = None
    ) -> None:
        self.repo = repository
        self.rng = rng or random.Random()

    # -- Request handling ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Create a game between two players (human or automated)."""

        dark = self._create_player(
            request.dark_player_name, PieceColor.DARK, request.dark_difficulty
        )
        light = self._create_player(
            request.light_player_name, PieceColor.LIGHT, request.light_difficulty
        )
        board = (
            Board.from_notation(request.starting_board)
            if request.starting_board
            else None
        )
        starting_color = (
            PieceColor[request.starting_color.name] if request.starting_color else None
        )
        new_game = Game.new_game(dark, light, board, starting_color, rng=self.rng)

        # a custom starting board might leave the first player without a move
        self._skip_unplayable_turn(new_game)
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Playable cells for the player whose turn it is."""

        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model, rng=self.rng)
        self._assert_in_progress(game)
        self._assert_your_turn(game, request.player_name)

        legal_moves = sorted(game.legal_moves_for(game.turn), key=Position.sort_key)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            color=Color[game.turn.name],
            legal_moves=[move.to_notation() for move in legal_moves],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Move attempt by a human player. The stored game is left untouched if the move is illegal."""

        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model, rng=self.rng)
        self._assert_in_progress(game)
        self._assert_your_turn(game, request.player_name)
        if game.current_player().is_automated:
            raise GameStateError(
                f"{request.player_name} is an automated player. Request an automated move instead."
            )

        position = Position.from_notation(request.position)
        if not game.apply(position):
            raise IllegalMoveError(f"Move not allowed: {request.position}")
        game.advance_turn()

        return self._store_update(request.game_id, game)

    def play_automated_move(self, request: AutomatedMoveRequest) -> GameResponse:
        """Let the automated player whose turn it is make its move."""

        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model, rng=self.rng)
        self._assert_in_progress(game)

        position = game.play_automated_turn()
        if position is not None:
            logger.info(
                "%s played %s in game %s",
                game.current_player(),
                position.to_notation(),
                request.game_id,
            )
        game.advance_turn()

        return self._store_update(request.game_id, game)

    def list_games(self) -> list[UUID]:
        """Show all recorded games."""
        return self.repo.list_game_ids()

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    @staticmethod
    def _create_player(
        name: str, color: PieceColor, difficulty: Optional[Difficulty]
    ) -> Player:
        if difficulty is None:
            return Player.human(name, color)
        return Player.automated(color, difficulty, name=name)

    @staticmethod
    def _skip_unplayable_turn(game: Game) -> None:
        if not game.current_player().can_play(game.board):
            game.advance_turn()

    @staticmethod
    def _assert_in_progress(game: Game) -> None:
        if game.is_finished():
            raise GameStateError(f"Game is not in progress. status: {game.status}")

    @staticmethod
    def _assert_your_turn(game: Game, player_name: str) -> None:
        """You must wait for your turn before requesting legal moves / making a move."""
        player_to_move = game.current_player()
        # stored names are cut to PLAYER_NAME_MAX_LENGTH
        if player_name.strip()[:PLAYER_NAME_MAX_LENGTH] != player_to_move.name:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _store_update(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in a GameModel, store it and build the response."""
        updated = game.to_model()
        self.repo.update_game(game_id, updated)
        if game.is_finished():
            logger.info("Game %s finished", game_id)
        return self._create_game_response(game_id, updated, game)

    def _create_game_response(
        self, game_id: UUID, model: GameModel, game: Optional[Game] = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = game or Game.from_model(model, rng=self.rng)

        winner = game.winner() if game.is_finished() else None
        last_move = game.last_move_played()
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            automated_players={
                color: Difficulty(level)
                for color, level in model.automated_players.items()
            },
            board=model.board,
            turn=Color(model.turn),
            scores={
                color.name.lower(): count for color, count in game.scores().items()
            },
            status=Status(model.status),
            last_move=last_move.to_notation() if last_move else None,
            move_history=model.moves,
            winner=winner.name if winner else None,
            is_draw=game.is_draw(),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
