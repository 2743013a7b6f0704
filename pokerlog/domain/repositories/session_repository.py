"""
PokerLog – Domain Repository Interface: PokerSession
======================================================
Interfaz abstracta para persistencia de sesiones.

Define el contrato para cualquier implementación de
repositorio de sesiones (SQLite, MySQL, InMemory, etc.)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pokerlog.domain.entities.poker_session import PokerSession


class SessionOrder(str, Enum):
    """Orden de listado de sesiones."""
    NEWEST_FIRST = "NEWEST_FIRST"  # date DESC, id DESC
    OLDEST_FIRST = "OLDEST_FIRST"  # date ASC, id ASC


class ISessionRepository(ABC):
    """
    Interfaz abstracta para repositorio de sesiones.

    TRANSACCIONES:
    El repositorio no hace commit automático.
    El caller controla la transacción (una por request).
    """

    @abstractmethod
    async def insert(self, session: PokerSession) -> int:
        """
        Persiste una sesión nueva.

        Returns:
            ID asignado por el store
        """

    @abstractmethod
    async def get_by_id(self, session_id: int) -> Optional[PokerSession]:
        """Busca una sesión por id. None si no existe."""

    @abstractmethod
    async def update(self, session_id: int, session: PokerSession) -> bool:
        """
        Reemplaza los campos mutables de una sesión existente.

        Returns:
            True si se actualizó, False si no existe
        """

    @abstractmethod
    async def delete(self, session_id: int) -> bool:
        """
        Elimina una sesión.

        Returns:
            True si se eliminó, False si no existe
        """

    @abstractmethod
    async def list_all(
        self, order: SessionOrder = SessionOrder.NEWEST_FIRST,
    ) -> List[PokerSession]:
        """Todas las sesiones en el orden pedido."""
