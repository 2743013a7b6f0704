"""Mappers ORM ↔ dominio."""
from pokerlog.infrastructure.persistence.mappers.session_mapper import SessionMapper
from pokerlog.infrastructure.persistence.mappers.location_mapper import LocationMapper

__all__ = ["SessionMapper", "LocationMapper"]
