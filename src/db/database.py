"""Generate database session"""

from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core import config
from src.db.schema import Base


def create_session_factory(database_url: Optional[str] = None) -> sessionmaker[Session]:
    """Engine for the configured database (unless a url is given). Ensures all tables are created."""
    engine = create_engine(
        database_url or config.CONFIG.database_url, echo=config.CONFIG.database_echo
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
