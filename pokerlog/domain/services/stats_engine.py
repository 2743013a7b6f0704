"""
PokerLog - Stats Engine
=========================
Motor de estadisticas agregadas sobre sesiones de poker.

PRINCIPIO CENTRAL:
  Todas las metricas se calculan en una UNICA PASADA O(n) sobre la
  lista de sesiones. Python puro con acumuladores incrementales.

FUNCION PURA:
  compute() recibe una secuencia de PokerSession y devuelve un
  SessionStats. No hace I/O, no guarda estado, no usa cache: la
  misma entrada produce siempre la misma salida. Se puede llamar
  concurrentemente sin sincronizacion.

REDONDEO:
  Solo se redondean los campos de salida. Los ratios derivados
  (avg_profit, avg_hourly_rate) usan las sumas SIN redondear, asi no
  se acumula error de redondeo entre metricas.
  Modo: ROUND_HALF_UP sobre Decimal (mitades se alejan del cero).

══════════════════════════════════════════════════════════════════
  FORMULAS (referencia rapida)
══════════════════════════════════════════════════════════════════

  profit_i        = cash_out_i - buy_in_i
  Win Rate        = winning / total * 100
  Avg Profit      = total_profit / total
  Total Hours     = sum(duration_minutes) / 60
  Avg Hourly Rate = total_profit / total_hours   (0 si total_hours == 0)

══════════════════════════════════════════════════════════════════
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

from pokerlog.domain.entities.poker_session import PokerSession
from pokerlog.domain.value_objects.category_key import CategoryKey
from pokerlog.domain.value_objects.session_stats import (
    CategoryBreakdown,
    ProfitPoint,
    SessionStats,
)

_CENTS = Decimal("0.01")
_TENTHS = Decimal("0.1")
_ZERO = Decimal("0")
_MINUTES_PER_HOUR = Decimal("60")

# Stats vacias para cuando no hay sesiones
_EMPTY_STATS = SessionStats()


def round_money(value: Decimal) -> Decimal:
    """Redondeo a 2 decimales (importes)."""
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def round_tenths(value: Decimal) -> Decimal:
    """Redondeo a 1 decimal (porcentajes y horas)."""
    return value.quantize(_TENTHS, rounding=ROUND_HALF_UP)


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class _CategoryAccumulator:
    """Acumula (sesiones, profit) por clave en orden de primera aparicion."""

    __slots__ = ("_buckets",)

    def __init__(self) -> None:
        # dict preserva orden de insercion
        self._buckets: Dict[CategoryKey, List] = {}

    def add(self, raw_value: str, profit: Decimal) -> None:
        key = CategoryKey.from_raw(raw_value)
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = [1, profit]
        else:
            bucket[0] += 1
            bucket[1] += profit

    def freeze(self) -> tuple:
        return tuple(
            CategoryBreakdown(key=key, sessions=count, profit=round_money(profit))
            for key, (count, profit) in self._buckets.items()
        )


class StatsEngine:
    """
    Motor de estadisticas de sesiones.

    Responsabilidades:
      1. Calcular todas las metricas en O(n) sobre la lista de sesiones.
      2. Desglosar por sala y por modalidad con clave etiquetada.
      3. Construir la curva de profit acumulado.

    No valida la entrada: los importes negativos se rechazan antes,
    en SessionService. Es una funcion total sobre entrada bien formada.
    """

    @staticmethod
    def compute(sessions: Iterable[PokerSession]) -> SessionStats:
        """
        Calcula TODAS las metricas en una unica pasada O(n).

        Args:
            sessions: Sesiones en orden de fecha ascendente. El orden
                      solo afecta a profit_curve y al orden de los
                      desgloses (primera aparicion).

        Returns:
            SessionStats inmutable. Con entrada vacia: todo a 0 y
            desgloses vacios.
        """
        n = 0
        winning = 0
        losing = 0
        total_profit = _ZERO
        total_minutes = 0
        best = None
        worst = None

        by_location = _CategoryAccumulator()
        by_game_type = _CategoryAccumulator()
        curve: list[ProfitPoint] = []

        # ── PASADA UNICA O(n) ──────────────────────────────────────
        for session in sessions:
            profit = _as_decimal(session.cash_out) - _as_decimal(session.buy_in)
            n += 1

            # (1) Clasificar
            if profit > 0:
                winning += 1
            elif profit < 0:
                losing += 1

            # (2) Acumular
            total_profit += profit
            total_minutes += session.duration_minutes or 0

            # (3) Extremos
            if best is None or profit > best:
                best = profit
            if worst is None or profit < worst:
                worst = profit

            # (4) Desgloses
            by_location.add(session.location, profit)
            by_game_type.add(session.game_type, profit)

            # (5) Curva acumulada
            curve.append(ProfitPoint(
                session_id=session.id,
                date=session.date,
                cumulative_profit=round_money(total_profit),
            ))

        if n == 0:
            return _EMPTY_STATS

        # ── Calculos derivados (protegidos contra /0) ──────────────
        count = Decimal(n)
        minutes = Decimal(total_minutes)

        win_rate = Decimal(winning) * 100 / count
        avg_profit = total_profit / count
        total_hours = minutes / _MINUTES_PER_HOUR

        # profit / (min / 60) == profit * 60 / min, sin pasar por horas redondeadas
        avg_hourly_rate = _ZERO
        if total_minutes > 0:
            avg_hourly_rate = total_profit * _MINUTES_PER_HOUR / minutes

        return SessionStats(
            total_sessions=n,
            total_profit=round_money(total_profit),
            winning_sessions=winning,
            losing_sessions=losing,
            win_rate=round_tenths(win_rate),
            avg_profit=round_money(avg_profit),
            total_hours=round_tenths(total_hours),
            avg_hourly_rate=round_money(avg_hourly_rate),
            best_session=round_money(best),
            worst_session=round_money(worst),
            by_location=by_location.freeze(),
            by_game_type=by_game_type.freeze(),
            profit_curve=tuple(curve),
        )
