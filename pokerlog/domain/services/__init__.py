"""Domain services (puros, sin I/O)."""
from pokerlog.domain.services.stats_engine import StatsEngine

__all__ = ["StatsEngine"]
