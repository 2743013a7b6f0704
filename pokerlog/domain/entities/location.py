"""
PokerLog – Domain Entity: Location
====================================
Sala/casino con nombre único. Solo sirve como lista de selección para
PokerSession.location; no hay referencia por id desde las sesiones.

Se crea explícitamente y nunca se actualiza ni se borra.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Location:
    """Sala con nombre único (match exacto, sensible a mayúsculas)."""

    name: str
    id: Optional[int] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
