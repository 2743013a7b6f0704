"""Repository implementations."""

from pokerlog.infrastructure.persistence.repositories.session_repository_impl import (
    SessionRepositoryImpl,
)
from pokerlog.infrastructure.persistence.repositories.location_repository_impl import (
    LocationRepositoryImpl,
)

__all__ = [
    "SessionRepositoryImpl",
    "LocationRepositoryImpl",
]
