"""
Dependency Injection Container.

Este módulo proporciona el contenedor de inyección de dependencias
que gestiona el DatabaseManager y construye repositorios y servicios.

Clean Architecture: Este contenedor vive en la capa más externa y es el único
lugar donde se crean dependencias concretas.

CICLO DE VIDA:
  No hay contenedor global. El entry point (lifespan de FastAPI o el CLI)
  lo construye con sus Settings, llama a startup() y, al terminar,
  a shutdown(). El handle de base de datos vive exactamente ese tiempo.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pokerlog.application.services.session_service import SessionService
from pokerlog.infrastructure.persistence.database import DatabaseManager
from pokerlog.infrastructure.persistence.repositories import (
    LocationRepositoryImpl,
    SessionRepositoryImpl,
)
from pokerlog.shared.config.settings import Settings
from pokerlog.shared.logging.logger import get_logger

logger = get_logger("container")


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    Sigue el principio de inversión de dependencias: SessionService
    depende de las interfaces de repositorio, el container le pasa
    las implementaciones SQLAlchemy.
    """

    # Configuración
    settings: Settings = field(default_factory=Settings)

    # Infraestructura
    _db_manager: Optional[DatabaseManager] = None

    # ==================== Infrastructure ====================

    @property
    def db_manager(self) -> DatabaseManager:
        """DatabaseManager ligado a estos settings (uno por container)."""
        if self._db_manager is None:
            self._db_manager = DatabaseManager(self.settings)
        return self._db_manager

    # ==================== Services ====================

    def get_session_service(self, session: AsyncSession) -> SessionService:
        """
        Factory para SessionService ligado a una AsyncSession.

        Cada transacción recibe su propio servicio y repositorios.
        """
        return SessionService(
            session_repository=SessionRepositoryImpl(session),
            location_repository=LocationRepositoryImpl(session),
        )

    @asynccontextmanager
    async def session_service(self) -> AsyncIterator[SessionService]:
        """
        SessionService dentro de una transacción (unidad de trabajo).

        USO:
            async with container.session_service() as service:
                await service.create_session(...)
        """
        async with self.db_manager.transaction() as session:
            yield self.get_session_service(session)

    # ==================== Lifecycle ====================

    async def startup(self) -> None:
        await self.db_manager.initialize()
        if self.settings.db_create_schema:
            await self.db_manager.create_schema()
        logger.info("Container iniciado | db=%s", self.settings.db_backend)

    async def shutdown(self) -> None:
        if self._db_manager is not None:
            await self._db_manager.close()
            self._db_manager = None
        logger.info("Container detenido")
