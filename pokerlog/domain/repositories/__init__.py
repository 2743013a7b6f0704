"""Domain repository interfaces (ABCs)."""
from pokerlog.domain.repositories.session_repository import (
    ISessionRepository,
    SessionOrder,
)
from pokerlog.domain.repositories.location_repository import ILocationRepository

__all__ = ["ISessionRepository", "SessionOrder", "ILocationRepository"]
