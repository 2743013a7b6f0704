"""
Session Repository Implementation.

Implementación concreta del repositorio de sesiones usando SQLAlchemy.
Implementa la interfaz ISessionRepository del dominio.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.domain.repositories.session_repository import (
    ISessionRepository,
    SessionOrder,
)
from pokerlog.infrastructure.persistence.mappers.session_mapper import SessionMapper
from pokerlog.infrastructure.persistence.models import PokerSessionModel

logger = logging.getLogger("pokerlog.infrastructure.session_repository")


class SessionRepositoryImpl(ISessionRepository):
    """
    Implementación async del repositorio de sesiones.

    Solo hace flush: el commit lo decide quien abrió la transacción.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._mapper = SessionMapper()

    async def _get_model(self, session_id: int) -> Optional[PokerSessionModel]:
        return await self._session.get(PokerSessionModel, session_id)

    # ════════════════════════════════════════════════════════════════
    #  ISessionRepository Implementation
    # ════════════════════════════════════════════════════════════════

    async def insert(self, session: PokerSession) -> int:
        """Persiste una sesión y retorna su ID."""
        model = self._mapper.to_model(session)
        self._session.add(model)
        await self._session.flush()

        session.created_at = model.created_at
        logger.debug("Sesión guardada: id=%s date=%s", model.id, model.date)
        return model.id

    async def get_by_id(self, session_id: int) -> Optional[PokerSession]:
        model = await self._get_model(session_id)
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def update(self, session_id: int, session: PokerSession) -> bool:
        """Reemplazo completo de los campos mutables."""
        model = await self._get_model(session_id)
        if model is None:
            logger.warning("Sesión no encontrada para update: %s", session_id)
            return False

        self._mapper.apply(model, session)
        await self._session.flush()
        return True

    async def delete(self, session_id: int) -> bool:
        model = await self._get_model(session_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def list_all(
        self, order: SessionOrder = SessionOrder.NEWEST_FIRST,
    ) -> List[PokerSession]:
        direction = desc if order == SessionOrder.NEWEST_FIRST else asc
        query = select(PokerSessionModel).order_by(
            direction(PokerSessionModel.date),
            direction(PokerSessionModel.id),
        )

        result = await self._session.execute(query)
        return [self._mapper.to_entity(m) for m in result.scalars().all()]
