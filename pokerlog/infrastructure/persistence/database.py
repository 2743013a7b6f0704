"""
PokerLog – SQLAlchemy ORM Base Configuration
==============================================
Configuración base para todos los modelos ORM y gestión del engine.

DECISIONES DE DISEÑO:

1. ASYNC ENGINE:
   - sqlalchemy[asyncio] + aiosqlite (por defecto) o aiomysql.

2. SIN SINGLETON:
   - DatabaseManager lo construye explícitamente el entry point
     (lifespan de FastAPI o CLI de bootstrap) y lo inyecta.
     No hay conexión global abierta en el primer acceso.

3. UNIDAD DE TRABAJO:
   - transaction() abre una AsyncSession dentro de una transacción:
     commit al salir sin error, rollback si hay excepción.
   - Los repositorios solo hacen flush.

4. NAMING CONVENTION:
   - Convención explícita para índices y constraints.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pokerlog.shared.config.settings import Settings
from pokerlog.shared.logging.logger import get_logger

logger = get_logger("infrastructure.database")

# ─── Naming Convention (para constraints consistentes) ─────────────────────
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base declarativa para todos los modelos ORM."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class DatabaseManager:
    """
    Dueño del engine async y de la session factory.

    USO:
        db = DatabaseManager(settings)
        await db.initialize()          # startup
        await db.create_schema()       # CREATE TABLE IF NOT EXISTS

        async with db.transaction() as session:
            repo = SessionRepositoryImpl(session)
            ...

        await db.close()               # shutdown
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._settings.database_url

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("DatabaseManager no inicializado. Llama a initialize() primero.")
        return self._engine

    async def initialize(self) -> None:
        """Inicializa el engine async y session factory."""
        if self._engine is not None:
            return

        s = self._settings
        url = make_url(self.database_url)
        options = {}

        if url.get_backend_name() == "sqlite":
            self._ensure_sqlite_dir(url.database)
        else:
            options.update(
                pool_size=s.db_pool_size,
                max_overflow=s.db_max_overflow,
                pool_recycle=3600,
                pool_pre_ping=True,
            )

        self._engine = create_async_engine(url, **options)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Evita queries automáticas post-commit
            autoflush=False,         # Control explícito de flush
        )
        logger.info("Database inicializada | backend=%s", url.get_backend_name())

    @staticmethod
    def _ensure_sqlite_dir(database: Optional[str]) -> None:
        if not database or database == ":memory:":
            return
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    async def create_schema(self) -> None:
        """Crea las tablas que falten."""
        # Registrar los modelos en Base.metadata
        from pokerlog.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_schema(self) -> None:
        from pokerlog.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        """Cierra el engine y todas las conexiones del pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """
        Sesión dentro de una transacción.

        Commit al salir normalmente; rollback automático en excepciones.
        """
        if self._session_factory is None:
            raise RuntimeError("DatabaseManager no inicializado. Llama a initialize() primero.")

        async with self._session_factory() as session:
            async with session.begin():
                yield session
