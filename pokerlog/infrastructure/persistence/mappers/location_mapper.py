"""
PokerLog – Location Mapper
============================
Mapea entre Location (domain entity) y LocationModel (ORM).
"""

from __future__ import annotations

from pokerlog.domain.entities.location import Location
from pokerlog.infrastructure.persistence.models.location import LocationModel


class LocationMapper:

    def to_model(self, location: Location) -> LocationModel:
        return LocationModel(name=location.name)

    def to_entity(self, model: LocationModel) -> Location:
        return Location(id=model.id, name=model.name)
