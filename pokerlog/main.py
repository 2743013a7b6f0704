"""
PokerLog – Main Application Entry Point
=========================================
Construye la app FastAPI: settings → logging → container → rutas.

ARQUITECTURA DE ARRANQUE:
  1. Cargar Settings (env / .env) y configurar logging
  2. FastAPI lifespan startup:
     a. Construir Container con esos Settings
     b. Inicializar DatabaseManager y crear tablas que falten
  3. FastAPI lifespan shutdown:
     a. Cerrar el engine

FLUJO DE DATOS:
  Cliente → Router → SessionService → Repositorios (SQLAlchemy) → DB
                                   └→ StatsEngine → SessionStats → JSON

  uvicorn pokerlog.main:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokerlog import __version__
from pokerlog.container import Container
from pokerlog.presentation.api.error_handlers import register_error_handlers
from pokerlog.presentation.api.routes import router
from pokerlog.shared.config.settings import Settings
from pokerlog.shared.logging.logger import get_logger, setup_logging

logger = get_logger("main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory de la aplicación.

    Args:
        settings: Configuración opcional. Si es None, se lee del entorno.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, sql_echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown: el container y su DB viven lo que vive la app."""
        logger.info("=" * 60)
        logger.info("  %s v%s", settings.app_name, __version__)
        logger.info("  Database: %s", settings.db_backend)
        logger.info("=" * 60)

        container = Container(settings=settings)
        await container.startup()
        app.state.container = container

        logger.info("✓ Todos los componentes iniciados correctamente")

        yield  # ← La app está corriendo aquí

        logger.info("Iniciando shutdown...")
        await container.shutdown()
        logger.info("✓ Shutdown completo")

    app = FastAPI(
        title=settings.app_name,
        description="Registro de sesiones de poker y estadísticas de rendimiento",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS para el cliente web
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Entry point de consola: levanta uvicorn con host/port de settings."""
    settings = Settings()
    uvicorn.run("pokerlog.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
