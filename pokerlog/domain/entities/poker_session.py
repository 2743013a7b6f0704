"""
PokerLog – Domain Entity: PokerSession
========================================
Una sesión de poker completada, con su resultado monetario.

DECISIONES DE DISEÑO:

POR QUÉ NO frozen=True:
  La sesión se actualiza por reemplazo completo de sus campos mutables
  (date, location, game_type, buy_in, cash_out, duration_minutes, notes).
  id y created_at los asigna el store una sola vez y no se tocan después.

POR QUÉ Decimal:
  Los importes se suman muchas veces al calcular estadísticas. Con float
  binario aparecen derivas tipo 0.1 + 0.2 != 0.3; con Decimal la
  aritmética es exacta en punto fijo y solo se redondea al serializar.

location ES TEXTO LIBRE:
  No es FK a Location. Una sala registrada es solo una ayuda de
  autocompletado; renombrar una sala no reescribe sesiones viejas.

CÁLCULO DE PROFIT:
  profit = cash_out - buy_in   (puede ser negativo)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class PokerSession:
    """Sesión de poker registrada por el usuario."""

    date: date
    buy_in: Decimal
    cash_out: Decimal
    location: str = ""
    game_type: str = ""
    duration_minutes: int = 0
    notes: str = ""
    id: Optional[int] = None               # asignado por el store
    created_at: Optional[datetime] = None  # asignado por el store

    @property
    def profit(self) -> Decimal:
        return self.cash_out - self.buy_in

    def replace_with(self, other: "PokerSession") -> None:
        """Reemplazo completo de los campos mutables (update)."""
        self.date = other.date
        self.location = other.location
        self.game_type = other.game_type
        self.buy_in = other.buy_in
        self.cash_out = other.cash_out
        self.duration_minutes = other.duration_minutes
        self.notes = other.notes

    def to_dict(self) -> dict:
        """Serialización para API."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "location": self.location,
            "game_type": self.game_type,
            "buy_in": float(self.buy_in),
            "cash_out": float(self.cash_out),
            "duration_minutes": self.duration_minutes,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "profit": float(self.profit),
        }
