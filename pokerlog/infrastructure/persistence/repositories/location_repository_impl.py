"""
Location Repository Implementation.

Implementación concreta del repositorio de salas usando SQLAlchemy.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pokerlog.domain.entities.location import Location
from pokerlog.domain.exceptions.domain_errors import ConflictError
from pokerlog.domain.repositories.location_repository import ILocationRepository
from pokerlog.infrastructure.persistence.mappers.location_mapper import LocationMapper
from pokerlog.infrastructure.persistence.models import LocationModel

logger = logging.getLogger("pokerlog.infrastructure.location_repository")


class LocationRepositoryImpl(ILocationRepository):
    """Implementación async del repositorio de salas."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._mapper = LocationMapper()

    async def insert(self, location: Location) -> int:
        model = self._mapper.to_model(location)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # La transacción queda inválida: el caller hace rollback
            logger.warning("Sala duplicada (constraint): %s", location.name)
            raise ConflictError(
                f"La sala '{location.name}' ya existe", field="name", value=location.name,
            ) from exc

        logger.debug("Sala guardada: id=%s name=%s", model.id, model.name)
        return model.id

    async def get_by_name(self, name: str) -> Optional[Location]:
        result = await self._session.execute(
            select(LocationModel).where(LocationModel.name == name)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def list_all(self) -> List[Location]:
        result = await self._session.execute(
            select(LocationModel).order_by(LocationModel.name)
        )
        return [self._mapper.to_entity(m) for m in result.scalars().all()]
