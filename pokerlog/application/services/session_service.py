"""
Session Service.

Servicio de aplicación que orquesta validación + repositorios para el
CRUD de sesiones y salas, y delega las estadísticas al StatsEngine.

ORDEN DE LAS COMPROBACIONES:
  1. Validación de input   → ValidationError (no toca el store)
  2. Existencia / unicidad → NotFoundError / ConflictError
  3. Persistencia
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List

from pokerlog.application.dto.session_dto import SessionInput
from pokerlog.domain.entities.location import Location
from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.domain.exceptions.domain_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from pokerlog.domain.repositories.location_repository import ILocationRepository
from pokerlog.domain.repositories.session_repository import (
    ISessionRepository,
    SessionOrder,
)
from pokerlog.domain.services.stats_engine import StatsEngine, round_money
from pokerlog.domain.value_objects.session_stats import SessionStats
from pokerlog.shared.logging.logger import get_logger

logger = get_logger("session_service")

_DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Límites de las columnas: Numeric(12, 2) e INTEGER de 32 bits
_AMOUNT_LIMIT = Decimal("1e10")
_MAX_DURATION_MINUTES = 2**31 - 1


def _parse_date(value) -> date:
    if value is None or value == "":
        raise ValidationError("La fecha es obligatoria", field="date", value=value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value)
    if _DATE_PATTERN.fullmatch(text):
        try:
            return datetime.strptime(text, _DATE_FORMAT).date()
        except ValueError:
            pass  # 2025-02-30 y similares
    raise ValidationError(
        f"Fecha inválida '{value}': se espera YYYY-MM-DD", field="date", value=value,
    )


def _parse_amount(value, field: str, label: str) -> Decimal:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{label} es obligatorio", field=field, value=value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{label} no es un número válido", field=field, value=value) from None
    if not amount.is_finite():
        raise ValidationError(f"{label} no es un número válido", field=field, value=value)
    if amount < 0:
        raise ValidationError(f"{label} debe ser >= 0", field=field, value=value)
    if amount >= _AMOUNT_LIMIT or round_money(amount) >= _AMOUNT_LIMIT:
        raise ValidationError(
            f"{label} debe ser menor que {_AMOUNT_LIMIT:,.0f}", field=field, value=value,
        )
    return round_money(amount)


def _parse_duration(value) -> int:
    if value is None or value == "":
        return 0
    not_integer = ValidationError(
        "La duración debe ser un número entero de minutos",
        field="duration_minutes", value=value,
    )
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise not_integer
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        raise not_integer from None
    if minutes < 0:
        raise ValidationError("La duración debe ser >= 0", field="duration_minutes", value=value)
    if minutes > _MAX_DURATION_MINUTES:
        raise ValidationError(
            f"La duración no puede superar {_MAX_DURATION_MINUTES} minutos",
            field="duration_minutes", value=value,
        )
    return minutes


class SessionService:
    """
    Servicio: CRUD de sesiones y salas + estadísticas.

    Los repositorios se inyectan desde el container; el servicio no
    conoce la tecnología de persistencia ni controla la transacción.
    """

    def __init__(
        self,
        session_repository: ISessionRepository,
        location_repository: ILocationRepository,
    ):
        self._session_repo = session_repository
        self._location_repo = location_repository

    # ════════════════════════════════════════════════════════════════
    #  VALIDACIÓN
    # ════════════════════════════════════════════════════════════════

    @staticmethod
    def build_session(data: SessionInput) -> PokerSession:
        """
        Valida el input y construye la entidad (sin id ni created_at).

        Raises:
            ValidationError: fecha ausente/inválida, importes ausentes o
                negativos, duración negativa o no entera.
        """
        try:
            return PokerSession(
                date=_parse_date(data.date),
                buy_in=_parse_amount(data.buy_in, "buy_in", "El buy-in"),
                cash_out=_parse_amount(data.cash_out, "cash_out", "El cash-out"),
                location=data.location or "",
                game_type=data.game_type or "",
                duration_minutes=_parse_duration(data.duration_minutes),
                notes=data.notes or "",
            )
        except ValidationError as exc:
            logger.warning("Input de sesión rechazado | field=%s msg=%s", exc.field, exc.message)
            raise

    # ════════════════════════════════════════════════════════════════
    #  SESIONES
    # ════════════════════════════════════════════════════════════════

    async def create_session(self, data: SessionInput) -> PokerSession:
        session = self.build_session(data)
        session.id = await self._session_repo.insert(session)
        logger.info(
            "Sesión creada | id=%s date=%s profit=%s",
            session.id, session.date.isoformat(), session.profit,
        )
        return session

    async def update_session(self, session_id: int, data: SessionInput) -> PokerSession:
        replacement = self.build_session(data)

        existing = await self._session_repo.get_by_id(session_id)
        if existing is None:
            raise NotFoundError(
                f"Sesión {session_id} no encontrada", entity="session", entity_id=session_id,
            )

        existing.replace_with(replacement)
        if not await self._session_repo.update(session_id, existing):
            raise NotFoundError(
                f"Sesión {session_id} no encontrada", entity="session", entity_id=session_id,
            )

        logger.info("Sesión actualizada | id=%s profit=%s", session_id, existing.profit)
        return existing

    async def delete_session(self, session_id: int) -> None:
        deleted = await self._session_repo.delete(session_id)
        if not deleted:
            raise NotFoundError(
                f"Sesión {session_id} no encontrada", entity="session", entity_id=session_id,
            )
        logger.info("Sesión eliminada | id=%s", session_id)

    async def get_session(self, session_id: int) -> PokerSession:
        session = await self._session_repo.get_by_id(session_id)
        if session is None:
            raise NotFoundError(
                f"Sesión {session_id} no encontrada", entity="session", entity_id=session_id,
            )
        return session

    async def list_sessions(self) -> List[PokerSession]:
        """Más recientes primero (date DESC, id DESC)."""
        return await self._session_repo.list_all(SessionOrder.NEWEST_FIRST)

    async def get_stats(self) -> SessionStats:
        """Recalcula siempre sobre el conjunto completo (sin cache)."""
        sessions = await self._session_repo.list_all(SessionOrder.OLDEST_FIRST)
        stats = StatsEngine.compute(sessions)
        logger.debug(
            "Stats recalculadas | sessions=%d profit=%s WR=%s%%",
            stats.total_sessions, stats.total_profit, stats.win_rate,
        )
        return stats

    # ════════════════════════════════════════════════════════════════
    #  SALAS
    # ════════════════════════════════════════════════════════════════

    async def create_location(self, name: str) -> Location:
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed:
            logger.warning("Nombre de sala rechazado | name=%r", name)
            raise ValidationError("El nombre de la sala es obligatorio", field="name", value=name)

        if await self._location_repo.get_by_name(trimmed) is not None:
            logger.warning("Sala duplicada | name=%s", trimmed)
            raise ConflictError(f"La sala '{trimmed}' ya existe", field="name", value=trimmed)

        location_id = await self._location_repo.insert(Location(name=trimmed))
        logger.info("Sala creada | id=%s name=%s", location_id, trimmed)
        return Location(name=trimmed, id=location_id)

    async def list_locations(self) -> List[Location]:
        """Ordenadas por nombre ascendente."""
        return await self._location_repo.list_all()
