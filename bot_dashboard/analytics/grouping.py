"""
Display ordering for bot trade lists: SELL/BUY pairing and table sorting.
"""

from __future__ import annotations
import math
from typing import Any, List, Sequence

from bot_dashboard.core.types import TradeAction, record_value, require_sequence

EXIT_DATE_FIELDS = ("exit_date", "exitDate")


def group_trades(trades: Sequence[Any]) -> List[Any]:
    """
    Reorder trades so each SELL is directly followed by the first later,
    not yet paired BUY of the same symbol. Every trade appears exactly once;
    unpaired trades keep their relative position.
    """
    trades = require_sequence(trades, "trades")
    placed = set()
    out: List[Any] = []
    for i, trade in enumerate(trades):
        trade_id = record_value(trade, "id")
        if trade_id in placed:
            continue
        out.append(trade)
        if record_value(trade, "action") != TradeAction.SELL:
            continue
        symbol = record_value(trade, "symbol")
        for candidate in trades[i + 1:]:
            candidate_id = record_value(candidate, "id")
            if (
                record_value(candidate, "action") == TradeAction.BUY
                and record_value(candidate, "symbol") == symbol
                and candidate_id not in placed
            ):
                out.append(candidate)
                placed.add(candidate_id)
                break
    return out


def _sort_key(field: str):
    if field == "symbol":
        return lambda t: (record_value(t, "symbol") or "").lower()
    missing = math.inf if field in EXIT_DATE_FIELDS else 0.0

    def key(t: Any) -> tuple:
        value = record_value(t, field)
        if value is None:
            return (0, missing, "")
        if isinstance(value, (int, float)):
            return (0, float(value), "")
        # text (dates, actions) sorts after all numbers
        return (1, 0.0, str(getattr(value, "value", value)))
    return key


def sort_trades(trades: Sequence[Any], field: str, descending: bool = True) -> List[Any]:
    """Table sort: case-insensitive text for symbol; numbers numerically and
    other values as text. Missing values count as 0, a missing exit date
    (trade still open) as +inf."""
    trades = require_sequence(trades, "trades")
    return sorted(trades, key=_sort_key(field), reverse=descending)
