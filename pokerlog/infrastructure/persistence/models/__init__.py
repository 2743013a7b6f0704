"""
Infrastructure Models Package.

Contiene los modelos ORM de SQLAlchemy para la persistencia.
Estos modelos representan la estructura de la base de datos,
NO las entidades de dominio.
"""

from pokerlog.infrastructure.persistence.models.poker_session import PokerSessionModel
from pokerlog.infrastructure.persistence.models.location import LocationModel

__all__ = [
    "PokerSessionModel",
    "LocationModel",
]
