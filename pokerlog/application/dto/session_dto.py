"""
PokerLog – Application DTO: Session
=====================================
Data Transfer Object de entrada para crear/actualizar sesiones.

Los campos llegan "crudos" (tal como los manda el cliente). La
validación de reglas de negocio la hace SessionService.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Union


@dataclass
class SessionInput:
    """Datos de una sesión a crear o reemplazar."""

    date: Optional[Union[str, date]] = None
    buy_in: Optional[Union[Decimal, float, int, str]] = None
    cash_out: Optional[Union[Decimal, float, int, str]] = None
    location: Optional[str] = None
    game_type: Optional[str] = None
    duration_minutes: Optional[int] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionInput":
        """Ignora claves desconocidas."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
