"""Domain entities."""
from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.domain.entities.location import Location

__all__ = ["PokerSession", "Location"]
