"""
Unit tests for pokerlog/domain/services/stats_engine.py: pure aggregation.

No DB, no mocks: StatsEngine.compute is a pure function over PokerSession lists.
"""

import random
from datetime import date
from decimal import Decimal

from conftest import make_session
from pokerlog.domain.services.stats_engine import StatsEngine, round_money, round_tenths
from pokerlog.domain.value_objects.category_key import UNSPECIFIED, CategoryKey


class TestEmptyInput:

    def test_all_zero(self):
        stats = StatsEngine.compute([])
        assert stats.total_sessions == 0
        assert stats.total_profit == 0
        assert stats.winning_sessions == 0
        assert stats.losing_sessions == 0
        assert stats.win_rate == 0
        assert stats.avg_profit == 0
        assert stats.total_hours == 0
        assert stats.avg_hourly_rate == 0
        assert stats.best_session == 0
        assert stats.worst_session == 0
        assert stats.by_location == ()
        assert stats.by_game_type == ()
        assert stats.profit_curve == ()

    def test_to_dict_shape(self):
        payload = StatsEngine.compute([]).to_dict()
        assert payload == {
            "total_sessions": 0,
            "total_profit": 0.0,
            "winning_sessions": 0,
            "losing_sessions": 0,
            "win_rate": 0.0,
            "avg_profit": 0.0,
            "avg_hourly_rate": 0.0,
            "total_hours": 0.0,
            "best_session": 0.0,
            "worst_session": 0.0,
            "by_location": [],
            "by_game_type": [],
            "profit_curve": [],
        }

    def test_accepts_generator(self):
        stats = StatsEngine.compute(s for s in [])
        assert stats.total_sessions == 0


class TestScenarios:

    def test_break_even_two_sessions(self):
        sessions = [
            make_session(buy_in=100, cash_out=150, duration_minutes=60, location="A"),
            make_session(buy_in=200, cash_out=150, duration_minutes=30, location="B"),
        ]
        stats = StatsEngine.compute(sessions)

        assert stats.total_sessions == 2
        assert stats.total_profit == Decimal("0")
        assert stats.winning_sessions == 1
        assert stats.losing_sessions == 1
        assert stats.win_rate == Decimal("50.0")
        assert stats.total_hours == Decimal("1.5")
        assert stats.avg_hourly_rate == Decimal("0.0")
        assert stats.best_session == Decimal("50")
        assert stats.worst_session == Decimal("-50")

    def test_single_session_without_duration(self):
        stats = StatsEngine.compute([make_session(buy_in=0, cash_out=500, duration_minutes=0)])

        assert stats.total_hours == 0
        assert stats.avg_hourly_rate == 0
        assert stats.best_session == Decimal("500")
        assert stats.worst_session == Decimal("500")
        assert stats.avg_profit == Decimal("500")
        assert stats.win_rate == Decimal("100.0")

    def test_zero_profit_is_neither_win_nor_loss(self):
        sessions = [
            make_session(buy_in=100, cash_out=100),
            make_session(buy_in=100, cash_out=120),
        ]
        stats = StatsEngine.compute(sessions)
        assert stats.winning_sessions == 1
        assert stats.losing_sessions == 0
        assert stats.winning_sessions + stats.losing_sessions < stats.total_sessions
        assert stats.win_rate == Decimal("50.0")

    def test_all_losses(self):
        sessions = [
            make_session(buy_in=100, cash_out=40, duration_minutes=120),
            make_session(buy_in=50, cash_out=0, duration_minutes=60),
        ]
        stats = StatsEngine.compute(sessions)
        assert stats.total_profit == Decimal("-110")
        assert stats.win_rate == 0
        assert stats.best_session == Decimal("-50")
        assert stats.worst_session == Decimal("-60")
        assert stats.total_hours == Decimal("3.0")
        assert stats.avg_hourly_rate == Decimal("-36.67")


class TestRounding:

    def test_hourly_rate_uses_unrounded_hours(self):
        # 7 min → 0.1 h para mostrar, pero el ratio usa 7/60 exacto
        stats = StatsEngine.compute([make_session(buy_in=0, cash_out=10, duration_minutes=7)])
        assert stats.total_hours == Decimal("0.1")
        assert stats.avg_hourly_rate == Decimal("85.71")

    def test_avg_profit_uses_unrounded_total(self):
        sessions = [
            make_session(buy_in=0, cash_out=10),
            make_session(buy_in=0, cash_out=0),
            make_session(buy_in=0, cash_out=0),
        ]
        stats = StatsEngine.compute(sessions)
        assert stats.avg_profit == Decimal("3.33")

    def test_win_rate_one_decimal(self):
        sessions = [
            make_session(buy_in=0, cash_out=1),
            make_session(buy_in=0, cash_out=1),
            make_session(buy_in=1, cash_out=0),
        ]
        assert StatsEngine.compute(sessions).win_rate == Decimal("66.7")

    def test_half_rounds_away_from_zero(self):
        assert round_money(Decimal("0.005")) == Decimal("0.01")
        assert round_money(Decimal("-0.005")) == Decimal("-0.01")
        assert round_tenths(Decimal("0.25")) == Decimal("0.3")

    def test_float_amounts_do_not_drift(self):
        sessions = [make_session() for _ in range(10)]
        for s in sessions:
            s.buy_in = 0.1
            s.cash_out = 0.2
        stats = StatsEngine.compute(sessions)
        assert stats.total_profit == Decimal("1.00")


class TestBreakdowns:

    def test_unspecified_bucket_separate_from_literal_unknown(self):
        sessions = [
            make_session(buy_in=0, cash_out=10, location="Unknown"),
            make_session(buy_in=0, cash_out=20, location=""),
        ]
        stats = StatsEngine.compute(sessions)

        assert len(stats.by_location) == 2
        named, unspecified = stats.by_location
        assert named.key == CategoryKey.named("Unknown")
        assert named.profit == Decimal("10")
        assert unspecified.key == UNSPECIFIED
        assert unspecified.key.is_unspecified
        assert unspecified.profit == Decimal("20")

    def test_serialized_unspecified_entry(self):
        stats = StatsEngine.compute([make_session(buy_in=5, cash_out=0)])
        assert stats.to_dict()["by_game_type"] == [
            {"game_type": None, "label": "Unknown", "sessions": 1, "profit": -5.0},
        ]

    def test_grouping_is_literal_and_case_sensitive(self):
        sessions = [
            make_session(location="Casino"),
            make_session(location="casino"),
            make_session(location="Casino "),
            make_session(location="Casino"),
        ]
        stats = StatsEngine.compute(sessions)
        assert [(b.key.name, b.sessions) for b in stats.by_location] == [
            ("Casino", 2),
            ("casino", 1),
            ("Casino ", 1),
        ]

    def test_first_occurrence_order(self):
        sessions = [
            make_session(game_type="PLO"),
            make_session(game_type="NLHE"),
            make_session(game_type="PLO"),
            make_session(game_type="Stud"),
        ]
        stats = StatsEngine.compute(sessions)
        assert [b.key.name for b in stats.by_game_type] == ["PLO", "NLHE", "Stud"]

    def test_breakdown_profits_partition_total(self):
        rng = random.Random(7)
        locations = ["A", "B", "", "Unknown"]
        games = ["NLHE", "", "PLO"]
        sessions = [
            make_session(
                buy_in=Decimal(rng.randint(0, 50000)) / 100,
                cash_out=Decimal(rng.randint(0, 50000)) / 100,
                location=rng.choice(locations),
                game_type=rng.choice(games),
            )
            for _ in range(40)
        ]
        stats = StatsEngine.compute(sessions)

        assert sum(b.profit for b in stats.by_location) == stats.total_profit
        assert sum(b.profit for b in stats.by_game_type) == stats.total_profit
        assert sum(b.sessions for b in stats.by_location) == stats.total_sessions
        assert sum(b.sessions for b in stats.by_game_type) == stats.total_sessions


class TestProperties:

    def _random_sessions(self, seed, n=25):
        rng = random.Random(seed)
        return [
            make_session(
                buy_in=Decimal(rng.randint(0, 100000)) / 100,
                cash_out=Decimal(rng.randint(0, 100000)) / 100,
                duration_minutes=rng.randint(0, 600),
                location=rng.choice(["A", "B", "C"]),
            )
            for _ in range(n)
        ]

    def test_total_profit_independent_of_order(self):
        sessions = self._random_sessions(seed=1)
        expected = sum(s.cash_out - s.buy_in for s in sessions)

        shuffled = list(sessions)
        random.Random(99).shuffle(shuffled)

        assert StatsEngine.compute(sessions).total_profit == expected
        assert StatsEngine.compute(shuffled).total_profit == expected

    def test_wins_plus_losses_bounded_by_total(self):
        for seed in range(5):
            stats = StatsEngine.compute(self._random_sessions(seed))
            assert stats.winning_sessions + stats.losing_sessions <= stats.total_sessions

    def test_deterministic(self):
        sessions = self._random_sessions(seed=3)
        assert StatsEngine.compute(sessions) == StatsEngine.compute(sessions)

    def test_hourly_rate_zero_without_hours_regardless_of_profit(self):
        sessions = [
            make_session(buy_in=0, cash_out=1000),
            make_session(buy_in=0, cash_out=250),
        ]
        stats = StatsEngine.compute(sessions)
        assert stats.total_profit == Decimal("1250")
        assert stats.avg_hourly_rate == 0


class TestProfitCurve:

    def test_cumulative_running_sum(self):
        sessions = [
            make_session(buy_in=100, cash_out=150, day=date(2025, 1, 1), session_id=1),
            make_session(buy_in=100, cash_out=20, day=date(2025, 1, 2), session_id=2),
            make_session(buy_in=10, cash_out=40.5, day=date(2025, 1, 3), session_id=3),
        ]
        curve = StatsEngine.compute(sessions).profit_curve

        assert [p.session_id for p in curve] == [1, 2, 3]
        assert [p.cumulative_profit for p in curve] == [
            Decimal("50"), Decimal("-30"), Decimal("0.5"),
        ]
        assert curve[-1].to_dict() == {
            "session_id": 3,
            "date": "2025-01-03",
            "cumulative_profit": 0.5,
        }
