"""
PokerLog – Domain Repository Interface: Location
==================================================
Interfaz abstracta para persistencia de salas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from pokerlog.domain.entities.location import Location


class ILocationRepository(ABC):
    """Repositorio de salas. Solo alta y consulta: no hay update ni delete."""

    @abstractmethod
    async def insert(self, location: Location) -> int:
        """
        Persiste una sala nueva.

        Raises:
            ConflictError: si el nombre ya existe (constraint único)

        Returns:
            ID asignado por el store
        """

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Location]:
        """Busca por nombre exacto (sensible a mayúsculas)."""

    @abstractmethod
    async def list_all(self) -> List[Location]:
        """Todas las salas ordenadas por nombre ascendente."""
