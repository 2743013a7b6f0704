"""
PokerLog - Session Stats (Value Object)
=========================================
Estructura inmutable con las metricas agregadas calculadas por el
StatsEngine sobre el conjunto completo de sesiones.

PRINCIPIO DE DISENO:
  Es un VALUE OBJECT puro: no tiene identidad, no muta, no tiene
  logica de negocio. Solo transporta datos ya calculados (y ya
  redondeados). Usa frozen dataclass para inmutabilidad garantizada.

  No se persiste: se recalcula en cada consulta desde las sesiones.

TIPOS:
  Los importes y ratios son Decimal ya redondeados a su precision
  de salida. to_dict() los convierte a float solo para JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from pokerlog.domain.value_objects.category_key import CategoryKey

_ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class CategoryBreakdown:
    """Conteo de sesiones y profit sumado de una categoria."""

    key: CategoryKey
    sessions: int
    profit: Decimal

    def to_dict(self, key_field: str) -> dict:
        """
        key_field: "location" | "game_type".
        El valor es None para el bucket sin especificar; label siempre
        trae el texto a mostrar.
        """
        return {
            key_field: self.key.name,
            "label": self.key.label,
            "sessions": self.sessions,
            "profit": float(self.profit),
        }


@dataclass(frozen=True, slots=True)
class ProfitPoint:
    """Punto de la curva de profit acumulado."""

    session_id: Optional[int]
    date: date
    cumulative_profit: Decimal

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "date": self.date.isoformat(),
            "cumulative_profit": float(self.cumulative_profit),
        }


@dataclass(frozen=True, slots=True)
class SessionStats:
    """
    Metricas de rendimiento sobre todas las sesiones.

    Atributos:
    ----------
    total_sessions : int
        N de sesiones analizadas.

    total_profit : Decimal
        Suma de (cash_out - buy_in), 2 decimales.

    winning_sessions / losing_sessions : int
        Sesiones con profit > 0 / profit < 0. Profit == 0 no cuenta
        en ninguna de las dos.

    win_rate : Decimal
        winning / total * 100, 1 decimal. Rango [0, 100].

    avg_profit : Decimal
        total_profit / total (sin redondear), 2 decimales.

    total_hours : Decimal
        Suma de duration_minutes / 60, 1 decimal.

    avg_hourly_rate : Decimal
        total_profit / total_hours (ambos sin redondear), 2 decimales.
        0 si no hay horas registradas.

    best_session / worst_session : Decimal
        Mayor / menor profit individual. 0 si no hay sesiones.

    by_location / by_game_type : tuple[CategoryBreakdown, ...]
        Desglose en orden de primera aparicion.

    profit_curve : tuple[ProfitPoint, ...]
        Profit acumulado sesion a sesion (orden de entrada).
        Es tuple (no list) para respetar frozen=True.
    """

    total_sessions: int = 0
    total_profit: Decimal = _ZERO
    winning_sessions: int = 0
    losing_sessions: int = 0
    win_rate: Decimal = _ZERO
    avg_profit: Decimal = _ZERO
    total_hours: Decimal = _ZERO
    avg_hourly_rate: Decimal = _ZERO
    best_session: Decimal = _ZERO
    worst_session: Decimal = _ZERO
    by_location: tuple = field(default_factory=tuple)
    by_game_type: tuple = field(default_factory=tuple)
    profit_curve: tuple = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serializacion para API REST."""
        return {
            "total_sessions": self.total_sessions,
            "total_profit": float(self.total_profit),
            "winning_sessions": self.winning_sessions,
            "losing_sessions": self.losing_sessions,
            "win_rate": float(self.win_rate),
            "avg_profit": float(self.avg_profit),
            "avg_hourly_rate": float(self.avg_hourly_rate),
            "total_hours": float(self.total_hours),
            "best_session": float(self.best_session),
            "worst_session": float(self.worst_session),
            "by_location": [b.to_dict("location") for b in self.by_location],
            "by_game_type": [b.to_dict("game_type") for b in self.by_game_type],
            "profit_curve": [p.to_dict() for p in self.profit_curve],
        }
