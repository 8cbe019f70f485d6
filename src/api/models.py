"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import GameError, InvalidRequestError
from src.core.shared_types import Color, Difficulty, Status
from src.othello.board import Board
from src.othello.position import Position

PieceColor = str
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """
    A player without difficulty is a human, a player with a difficulty is automated.
    Without starting_color the first player to move is picked at random.
    """

    dark_player_name: str
    light_player_name: str
    dark_difficulty: Optional[Difficulty] = None
    light_difficulty: Optional[Difficulty] = None
    starting_color: Optional[Color] = None
    starting_board: Optional[str] = None

    @field_validator("dark_player_name", "light_player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value.strip()

    @field_validator("starting_board")
    @classmethod
    def validate_starting_board(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        try:
            Board.from_notation(value)
        except GameError as error:
            raise InvalidRequestError(f"Invalid starting board: {error}") from error
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    position: str

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: str) -> str:
        try:
            Position.from_notation(value)
        except GameError as error:
            raise InvalidRequestError(
                f"Cannot interpret position: {value!r} as a cell on the board."
            ) from error
        return value.strip().upper()


class AutomatedMoveRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PieceColor, PlayerName]
    automated_players: dict[PieceColor, Difficulty]
    board: str
    turn: Color
    scores: dict[PieceColor, int]
    status: Status
    last_move: Optional[str]
    move_history: list[str]
    winner: Optional[PlayerName] = None
    is_draw: bool = False


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    color: Color
    legal_moves: list[str]
