"""
PokerLog – Domain Layer
=========================
Núcleo puro del sistema. CERO dependencias externas.

Este módulo contiene:
- entities/: Entidades de negocio (PokerSession, Location)
- value_objects/: Objetos inmutables (SessionStats, CategoryKey)
- services/: Servicios de dominio puros (StatsEngine)
- repositories/: Interfaces abstractas (ABCs)
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de:
- infrastructure/
- presentation/
- application/
- Frameworks externos (SQLAlchemy, FastAPI, etc.)
"""

from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.domain.entities.location import Location
from pokerlog.domain.value_objects.session_stats import SessionStats
from pokerlog.domain.services.stats_engine import StatsEngine

__all__ = [
    "PokerSession",
    "Location",
    "SessionStats",
    "StatsEngine",
]
