"""Persistencia SQLAlchemy async (SQLite / MySQL)."""
from pokerlog.infrastructure.persistence.database import Base, DatabaseManager

__all__ = ["Base", "DatabaseManager"]
