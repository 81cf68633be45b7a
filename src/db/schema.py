"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.shared_types import Status


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """Fleets and shots are stored in their text encoding."""

    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    p1_ships: Mapped[str]
    p2_ships: Mapped[str]
    p1_shots: Mapped[list[str]] = mapped_column(JSON, default=list)
    p2_shots: Mapped[list[str]] = mapped_column(JSON, default=list)
    result: Mapped[str] = mapped_column(default=Status.IN_SETUP.value)
    turn: Mapped[str]
    messages: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
