"""
PokerLog – Database Bootstrap
===============================
Script para crear el esquema y cargar datos de ejemplo.

USO:
    python -m pokerlog.db.bootstrap            # Crear tablas que falten
    python -m pokerlog.db.bootstrap --reset    # Dropear y recrear todo
    python -m pokerlog.db.bootstrap --seed     # Insertar datos de ejemplo

La base de datos se toma de Settings (env / .env), igual que la API.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import List, Optional

from pokerlog.application.dto.session_dto import SessionInput
from pokerlog.container import Container
from pokerlog.shared.config.settings import Settings
from pokerlog.shared.logging.logger import get_logger, setup_logging

logger = get_logger("db.bootstrap")

SEED_LOCATIONS = ["Casino Barcelona", "Gran Casino Madrid", "Home Game"]

SEED_SESSIONS = [
    SessionInput(date="2025-01-04", location="Casino Barcelona", game_type="NLHE 1/2",
                 buy_in="200", cash_out="340", duration_minutes=240),
    SessionInput(date="2025-01-11", location="Home Game", game_type="PLO 0.5/1",
                 buy_in="100", cash_out="35", duration_minutes=180, notes="Mesa muy agresiva"),
    SessionInput(date="2025-01-18", location="Gran Casino Madrid", game_type="NLHE 1/2",
                 buy_in="300", cash_out="300", duration_minutes=150),
    SessionInput(date="2025-01-25", location="Casino Barcelona", game_type="NLHE 2/5",
                 buy_in="500", cash_out="825.50", duration_minutes=300),
]


async def run_bootstrap(
    settings: Settings, reset: bool = False, seed: bool = False,
) -> None:
    """
    Crea el esquema y, opcionalmente, lo resetea y/o lo llena.

    Args:
        reset: Si True, dropea todas las tablas primero
        seed: Si True, inserta datos de ejemplo después
    """
    container = Container(settings=settings.model_copy(update={"db_create_schema": False}))
    await container.startup()
    db = container.db_manager

    try:
        if reset:
            logger.warning("⚠️ Reseteando base de datos...")
            await db.drop_schema()

        await db.create_schema()
        logger.info("✅ Esquema verificado/creado")

        if seed:
            await run_seed(container)
    finally:
        await container.shutdown()


async def run_seed(container: Container) -> None:
    """Inserta datos de ejemplo a través del SessionService."""
    logger.info("🌱 Insertando datos de seed...")

    async with container.session_service() as service:
        existing = {loc.name for loc in await service.list_locations()}
        for name in SEED_LOCATIONS:
            if name not in existing:
                await service.create_location(name)

        for data in SEED_SESSIONS:
            await service.create_session(data)

    logger.info(
        "  ✅ Seed completado (%d salas, %d sesiones)",
        len(SEED_LOCATIONS), len(SEED_SESSIONS),
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="PokerLog Database Bootstrap")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Dropear todas las tablas antes de crearlas",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insertar datos de ejemplo después de crear el esquema",
    )

    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level, sql_echo=settings.db_echo)
    asyncio.run(run_bootstrap(settings, reset=args.reset, seed=args.seed))


if __name__ == "__main__":
    main()
