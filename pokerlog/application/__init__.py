"""
PokerLog – Application Layer
==============================
Capa de orquestación.

Este módulo contiene:
- services/: SessionService (validación + repositorios + StatsEngine)
- dto/: Data Transfer Objects

REGLA DE DEPENDENCIA:
Esta capa puede importar de:
- domain/ (entidades, servicios, interfaces)

NO puede importar de:
- infrastructure/ (implementaciones concretas)
- presentation/ (API)
"""

from pokerlog.application.dto.session_dto import SessionInput
from pokerlog.application.services.session_service import SessionService

__all__ = [
    "SessionInput",
    "SessionService",
]
