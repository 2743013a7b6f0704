"""
PokerLog – Session Mapper
===========================
Mapea entre PokerSession (domain entity) y PokerSessionModel (ORM).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.infrastructure.persistence.models.poker_session import PokerSessionModel


class SessionMapper:
    """
    Mapper bidireccional PokerSession ↔ PokerSessionModel.
    """

    def to_model_fields(self, session: PokerSession) -> Dict[str, Any]:
        """
        Campos mutables de la entidad (sin id ni created_at).

        Se usa tanto para INSERT como para el reemplazo completo en UPDATE.
        """
        return {
            "date": session.date,
            "location": session.location,
            "game_type": session.game_type,
            "buy_in": Decimal(session.buy_in),
            "cash_out": Decimal(session.cash_out),
            "duration_minutes": session.duration_minutes,
            "notes": session.notes,
        }

    def to_model(self, session: PokerSession) -> PokerSessionModel:
        return PokerSessionModel(**self.to_model_fields(session))

    def apply(self, model: PokerSessionModel, session: PokerSession) -> None:
        """Reescribe todos los campos mutables del modelo."""
        for name, value in self.to_model_fields(session).items():
            setattr(model, name, value)

    def to_entity(self, model: PokerSessionModel) -> PokerSession:
        return PokerSession(
            id=model.id,
            date=model.date,
            location=model.location or "",
            game_type=model.game_type or "",
            buy_in=Decimal(str(model.buy_in)),
            cash_out=Decimal(str(model.cash_out)),
            duration_minutes=model.duration_minutes or 0,
            notes=model.notes or "",
            created_at=model.created_at,
        )
