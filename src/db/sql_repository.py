"""GameRepository backed by the `games` table (SQLAlchemy 2.0 session)"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Every public method commits its own unit of work and hands back plain GameModels."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """None when no row carries this id."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Insert a row under a fresh UUID; returns the model as read back from the table."""

        new_id = uuid4()
        game_db = DBGame(
            id=new_id,
            board=game.board,
            registered_players=game.registered_players,
            automated_players=game.automated_players,
            turn=game.turn,
            moves=game.moves,
            status=game.status,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        logger.debug("Stored new game %s", new_id)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite board, players, turn, moves and status of an existing row."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.board = game.board
        game_db.registered_players = game.registered_players
        game_db.automated_players = game.automated_players
        game_db.turn = game.turn
        # NOTE assign a new list: JSON columns do not track in-place mutation
        game_db.moves = list(game.moves)
        game_db.status = game.status
        self.db.commit()
        self.db.refresh(game_db)
        logger.debug("Updated game %s (%d moves)", game_id, len(game.moves))
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Delete the row, returning its last state (None if it did not exist)."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        logger.debug("Deleted game %s", game_id)
        return game_model

    def list_game_ids(self) -> list[UUID]:
        """IDs of all stored games, oldest first."""
        query = select(DBGame.id).order_by(DBGame.created_at)
        return list(self.db.scalars(query))

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Copy the JSON columns so callers never mutate ORM state."""
        return GameModel(
            board=game_db.board,
            registered_players=dict(game_db.registered_players),
            automated_players=dict(game_db.automated_players),
            turn=game_db.turn,
            moves=list(game_db.moves),
            status=game_db.status,
        )
