"""
Shared pytest fixtures for the PokerLog test suite.

Los tests de persistencia usan un archivo SQLite temporal por test.
El código async se ejecuta con asyncio.run() dentro de tests síncronos.
"""

import asyncio
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pokerlog.container import Container
from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.main import create_app
from pokerlog.shared.config.settings import Settings


def make_session(
    buy_in="0",
    cash_out="0",
    duration_minutes=0,
    location="",
    game_type="",
    day=date(2025, 1, 1),
    session_id=None,
) -> PokerSession:
    """PokerSession en memoria para tests del StatsEngine."""
    return PokerSession(
        id=session_id,
        date=day,
        buy_in=Decimal(str(buy_in)),
        cash_out=Decimal(str(cash_out)),
        duration_minutes=duration_minutes,
        location=location,
        game_type=game_type,
    )


@pytest.fixture
def settings(tmp_path):
    """Settings aislados del entorno, con SQLite en tmp_path."""
    db_file = tmp_path / "poker_test.db"
    return Settings(
        _env_file=None,
        db_url=f"sqlite+aiosqlite:///{db_file.as_posix()}",
        log_level="WARNING",
    )


@pytest.fixture
def run_in_container(settings):
    """
    Ejecuta `body(container)` con un Container iniciado.

    Usage:
        async def body(container):
            async with container.session_service() as service:
                ...
        run_in_container(body)
    """

    def _run(body):
        async def _main():
            container = Container(settings=settings)
            await container.startup()
            try:
                return await body(container)
            finally:
                await container.shutdown()

        return asyncio.run(_main())

    return _run


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
