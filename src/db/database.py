"""Generate database session"""

import logging
from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import IN_MEMORY_DATABASE_URL, Settings, get_settings
from src.db.schema import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """
    An in-memory SQLite database only exists for a single connection.
    StaticPool hands out that same connection every time, so all sessions see the same tables.
    """
    if settings.database_url == IN_MEMORY_DATABASE_URL:
        engine = create_engine(
            settings.database_url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(settings.database_url, echo=settings.database_echo)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url)
    return engine


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
