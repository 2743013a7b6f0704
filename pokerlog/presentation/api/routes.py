"""
PokerLog – API Routes (FastAPI)
=================================
Endpoints REST para el cliente web.

Endpoints disponibles:
  GET    /api/health          → health check
  GET    /api/sessions        → sesiones (más recientes primero)
  GET    /api/sessions/{id}   → una sesión
  POST   /api/sessions        → crear sesión
  PUT    /api/sessions/{id}   → reemplazar sesión
  DELETE /api/sessions/{id}   → eliminar sesión
  GET    /api/stats           → estadísticas agregadas
  GET    /api/locations       → salas (orden alfabético)
  POST   /api/locations       → crear sala
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from pokerlog.application.services.session_service import SessionService
from pokerlog.container import Container
from pokerlog.presentation.api.dependencies import get_container, get_session_service
from pokerlog.presentation.api.schemas import LocationBody, SessionBody
from pokerlog.shared.logging.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter(prefix="/api")


# ─── Estado ───────────────────────────────────────────────────────────

@router.get("/health")
async def health_check(container: Container = Depends(get_container)) -> dict:
    """Health check para monitoreo."""
    return {
        "status": "ok",
        "service": container.settings.app_name.lower(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ─── Sesiones ─────────────────────────────────────────────────────────

@router.get("/sessions")
async def list_sessions(service: SessionService = Depends(get_session_service)) -> list:
    sessions = await service.list_sessions()
    return [s.to_dict() for s in sessions]


@router.get("/sessions/{session_id}")
async def get_session(
    session_id: int, service: SessionService = Depends(get_session_service),
) -> dict:
    session = await service.get_session(session_id)
    return session.to_dict()


@router.post("/sessions", status_code=201)
async def create_session(
    body: SessionBody, service: SessionService = Depends(get_session_service),
) -> dict:
    session = await service.create_session(body.to_input())
    return session.to_dict()


@router.put("/sessions/{session_id}")
async def update_session(
    session_id: int,
    body: SessionBody,
    service: SessionService = Depends(get_session_service),
) -> dict:
    session = await service.update_session(session_id, body.to_input())
    return session.to_dict()


@router.delete("/sessions/{session_id}")
async def delete_session(
    session_id: int, service: SessionService = Depends(get_session_service),
) -> dict:
    await service.delete_session(session_id)
    return {"message": "Sesión eliminada"}


# ─── Estadísticas ─────────────────────────────────────────────────────

@router.get("/stats")
async def session_stats(service: SessionService = Depends(get_session_service)) -> dict:
    """
    Métricas agregadas sobre todas las sesiones.

    total_sessions, total_profit, winning_sessions, losing_sessions,
    win_rate, avg_profit, avg_hourly_rate, total_hours, best_session,
    worst_session, by_location, by_game_type, profit_curve.

    Se recalcula completo en cada request (sin cache).
    """
    stats = await service.get_stats()
    return stats.to_dict()


# ─── Salas ────────────────────────────────────────────────────────────

@router.get("/locations")
async def list_locations(service: SessionService = Depends(get_session_service)) -> list:
    locations = await service.list_locations()
    return [loc.to_dict() for loc in locations]


@router.post("/locations", status_code=201)
async def create_location(
    body: LocationBody, service: SessionService = Depends(get_session_service),
) -> dict:
    location = await service.create_location(body.name)
    return location.to_dict()
