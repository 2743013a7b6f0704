"""
PokerLog – API Schemas (Pydantic)
===================================
Schemas de request para la API REST.

Los tipos son permisivos a propósito: pydantic solo rechaza lo que
no se puede convertir (ej: buy_in="abc"). Las reglas de negocio
(fecha obligatoria, importes >= 0) las aplica SessionService.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from pokerlog.application.dto.session_dto import SessionInput


class SessionBody(BaseModel):
    """Body para crear/reemplazar una sesión."""

    date: Optional[str] = None
    location: Optional[str] = None
    game_type: Optional[str] = None
    buy_in: Optional[Decimal] = None
    cash_out: Optional[Decimal] = None
    duration_minutes: Optional[int] = None
    notes: Optional[str] = None

    def to_input(self) -> SessionInput:
        return SessionInput(
            date=self.date,
            location=self.location,
            game_type=self.game_type,
            buy_in=self.buy_in,
            cash_out=self.cash_out,
            duration_minutes=self.duration_minutes,
            notes=self.notes,
        )


class LocationBody(BaseModel):
    """Body para crear una sala."""

    name: Optional[str] = None
