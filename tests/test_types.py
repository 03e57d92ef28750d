"""Unit tests for core.types."""

import pytest
from bot_dashboard.core.types import (
    InvalidRecordError,
    PositionRecord,
    TradeAction,
    TradeRecord,
    record_value,
)


def test_trade_from_dict():
    t = TradeRecord.from_dict({
        "id": 7, "symbol": "AAPL", "action": "sell", "profit_loss_pct": "4.5",
        "price": 190.0, "is_live": True, "signal_date": "2026-03-02T00:00:00Z",
    })
    assert t.action is TradeAction.SELL
    assert t.profit_loss_pct == 4.5
    assert t.is_live is True
    assert t.timestamp == "2026-03-02T00:00:00Z"
    assert t.raw["price"] == 190.0


def test_trade_unknown_action_kept_as_string():
    t = TradeRecord.from_dict({"id": 1, "symbol": "X", "action": "hold"})
    assert t.action == "HOLD"
    assert not isinstance(t.action, TradeAction)


def test_trade_missing_symbol():
    with pytest.raises(InvalidRecordError):
        TradeRecord.from_dict({"id": 1, "action": "BUY"})


def test_trade_not_a_mapping():
    with pytest.raises(InvalidRecordError):
        TradeRecord.from_dict(["id", 1])


def test_position_from_dict():
    p = PositionRecord.from_dict({"id": "p1", "symbol": "MSFT", "total_return_pct": None, "avg_price": 10})
    assert p.total_return_pct is None
    assert p.avg_price == 10.0
    assert p.is_live is False


def test_record_value_mapping_and_object():
    p = PositionRecord(id=1, symbol="A", total_return_pct=2.0)
    assert record_value(p, "total_return_pct") == 2.0
    assert record_value({"symbol": "A"}, "symbol") == "A"
    assert record_value({}, "symbol", "-") == "-"
