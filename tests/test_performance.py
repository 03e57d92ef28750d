"""Unit tests for analytics.performance."""

import math
import random

import pytest
from bot_dashboard.analytics.performance import enrich_performance, filter_live, live_performance
from bot_dashboard.core.types import InvalidRecordError, PositionRecord, TradeRecord


def test_mixed_items():
    p = enrich_performance(
        None,
        [{"profit_loss_pct": 10}, {"profit_loss_pct": -5}],
        [{"total_return_pct": 0}],
    )
    assert p["wins"] == 1
    assert p["losses"] == 1
    assert p["total_trades"] == 3
    assert p["win_rate"] == pytest.approx(33.333, rel=1e-3)
    assert p["avg_win_pct"] == 10
    assert p["avg_loss_pct"] == 5
    assert p["risk_reward"] == 2


def test_all_wins_is_infinite_risk_reward():
    p = enrich_performance(None, [{"profit_loss_pct": 20}], [])
    assert p["risk_reward"] == float("inf")
    assert p["win_rate"] == 100.0
    assert p["avg_loss_pct"] == 0


def test_empty_keeps_existing_win_rate():
    p = enrich_performance({"win_rate": 42.0, "total_value": 1234}, [], [])
    assert p["win_rate"] == 42.0
    assert p["total_value"] == 1234
    assert p["total_trades"] == 0
    assert p["wins"] == 0 and p["losses"] == 0
    assert p["avg_win_pct"] == 0 and p["avg_loss_pct"] == 0
    assert p["risk_reward"] == 0


def test_empty_without_perf():
    p = enrich_performance(None, [], [])
    assert p["win_rate"] == 0
    assert p["risk_reward"] == 0


def test_only_losses_gives_zero_risk_reward():
    p = enrich_performance(None, [{"profit_loss_pct": -4}, {"profit_loss_pct": -2}], [])
    assert p["avg_loss_pct"] == 3
    assert p["risk_reward"] == 0
    assert p["win_rate"] == 0


def test_missing_pct_is_neutral():
    p = enrich_performance(None, [{"profit_loss_pct": None}, {}], [{"total_return_pct": None}])
    assert p["total_trades"] == 3
    assert p["wins"] + p["losses"] == 0
    assert p["win_rate"] == 0


def test_input_perf_not_mutated():
    perf = {"win_rate": 10.0, "wins": 99}
    p = enrich_performance(perf, [{"profit_loss_pct": 1}], [])
    assert perf == {"win_rate": 10.0, "wins": 99}
    assert p["wins"] == 1


def test_accepts_record_objects():
    trades = [TradeRecord(id=1, symbol="A", action="SELL", profit_loss_pct=6.0)]
    positions = [PositionRecord(id=2, symbol="B", total_return_pct=-3.0)]
    p = enrich_performance(None, trades, positions)
    assert p["risk_reward"] == pytest.approx(2.0)


def test_order_independent():
    rng = random.Random(7)
    trades = [{"profit_loss_pct": rng.uniform(-10, 10)} for _ in range(20)]
    positions = [{"total_return_pct": rng.uniform(-10, 10)} for _ in range(5)]
    a = enrich_performance(None, trades, positions)
    rng.shuffle(trades)
    rng.shuffle(positions)
    b = enrich_performance(None, trades, positions)
    for key in ("wins", "losses", "win_rate", "avg_win_pct", "avg_loss_pct"):
        assert a[key] == pytest.approx(b[key])
    assert a["wins"] + a["losses"] <= a["total_trades"]
    assert 0 <= a["win_rate"] <= 100


def test_rejects_none_lists():
    with pytest.raises(InvalidRecordError):
        enrich_performance(None, None, [])
    with pytest.raises(InvalidRecordError):
        enrich_performance(None, [], "positions")


def test_non_numeric_pct_raises():
    with pytest.raises(ValueError):
        enrich_performance(None, [{"profit_loss_pct": "n/a"}], [])


def test_filter_live():
    records = [{"id": 1, "is_live": True}, {"id": 2, "is_live": False}, {"id": 3}]
    assert [r["id"] for r in filter_live(records, True)] == [1]
    everything = filter_live(records, False)
    assert everything == records and everything is not records


def test_live_performance():
    positions = [
        {"avg_price": 100.0, "current_price": 110.0, "quantity": 2, "total_return_pct": 10.0},
        {"avg_price": 50.0, "current_price": 45.0, "quantity": None, "total_return_pct": -10.0},
    ]
    trades = [{"profit_loss": 30.0, "profit_loss_pct": 15.0, "buy_price": 200.0, "quantity": 1}]
    p = live_performance(positions, trades, {"bot": "ditz"})
    assert p["bot"] == "ditz"
    assert p["open_positions"] == 2
    assert p["invested_in_positions"] == 250.0
    assert p["current_value"] == 265.0
    assert p["unrealized_gain"] == 15.0
    assert p["total_return_pct"] == pytest.approx(6.0)
    assert p["realized_profit"] == 30.0
    assert p["total_gain"] == 45.0
    assert p["overall_return_pct"] == pytest.approx(10.0)
    assert p["avg_return_per_trade"] == pytest.approx(5.0)
    assert p["total_buys"] == 3
    assert p["total_trades"] == 3
    assert p["wins"] == 2 and p["losses"] == 1
    assert p["risk_reward"] == pytest.approx(1.25)


def test_live_performance_empty():
    p = live_performance([], [])
    assert p["total_return_pct"] == 0.0
    assert p["overall_return_pct"] == 0.0
    assert p["win_rate"] == 0
    assert not math.isinf(p["risk_reward"])


def test_live_performance_ignores_server_win_rate_when_empty():
    p = live_performance([], [], {"win_rate": 75.0, "total_value": 10})
    assert p["win_rate"] == 0
    assert p["total_trades"] == 0
    assert p["total_value"] == 10
