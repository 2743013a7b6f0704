"""
PokerLog – PokerSession ORM Model
===================================
Modelo para la tabla `sessions`.

DECISIONES DE DISEÑO:

- Numeric(12, 2) para importes: punto fijo, sin deriva de float.
- location es texto libre (NO FK a locations).
- created_at se fija una sola vez en el INSERT (UTC naive); update no lo toca.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pokerlog.infrastructure.persistence.database import Base


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


class PokerSessionModel(Base):
    """Modelo ORM para sesiones de poker."""

    __tablename__ = "sessions"

    # ─── Primary Key ──────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ─── Datos de la sesión ───────────────────────────────────────────
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    game_type: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    buy_in: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    cash_out: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # ─── Timing ───────────────────────────────────────────────────────
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    __table_args__ = (
        Index("idx_sessions_date_id", "date", "id"),
    )

    def __repr__(self) -> str:
        return (
            f"<PokerSession(id={self.id}, date={self.date}, "
            f"buy_in={self.buy_in}, cash_out={self.cash_out})>"
        )
