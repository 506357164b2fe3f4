"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.database import build_engine, get_db
from src.db.sql_repository import GameModel, SQLGameRepository


def test_build_in_memory_engine() -> None:
    """Tables exist right away, and separate sessions share the same in-memory database."""
    engine = build_engine(Settings())
    assert "games" in inspect(engine).get_table_names()

    model = GameModel(board_fen="8/8/8/8/8/8/8/8", current_player="white")
    with Session(engine) as first:
        _, game_id = SQLGameRepository(first).create_game(model)
    with Session(engine) as second:
        assert SQLGameRepository(second).get_game(game_id) == model


def test_get_db_yields_session() -> None:
    generator = get_db()
    db = next(generator)
    assert isinstance(db, Session)
    generator.close()
