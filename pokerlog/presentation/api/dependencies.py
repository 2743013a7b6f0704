"""
PokerLog – API Dependencies
=============================
Dependencies de FastAPI que resuelven el container y el servicio.

Cada request obtiene su propia AsyncSession dentro de una transacción:
commit si el handler termina bien, rollback si lanza excepción.
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, Request

from pokerlog.application.services.session_service import SessionService
from pokerlog.container import Container


def get_container(request: Request) -> Container:
    """Container creado en el lifespan de la app."""
    return request.app.state.container


async def get_session_service(
    container: Container = Depends(get_container),
) -> AsyncIterator[SessionService]:
    async with container.session_service() as service:
        yield service
