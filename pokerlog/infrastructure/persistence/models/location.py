"""
PokerLog – Location ORM Model
===============================
Modelo para la tabla `locations`. name es UNIQUE.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pokerlog.infrastructure.persistence.database import Base


class LocationModel(Base):
    """Modelo ORM para salas."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name='{self.name}')>"
