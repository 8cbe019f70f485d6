"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
PieceColor = str
PlayerName = str
DifficultyName = str


@dataclass
class GameModel:
    """Transport-safe representation of an Othello game used between API, Service, DB, and Game layers.

    Contains everything needed to rebuild a Game: the board, both players (with the difficulty of automated ones),
    whose turn it is, the moves played so far (in notation, e.g. 'D3') and the status.
    """

    board: str
    registered_players: dict[PieceColor, PlayerName]
    turn: PieceColor
    status: str
    moves: list[str] = field(default_factory=list)
    automated_players: dict[PieceColor, DifficultyName] = field(default_factory=dict)
