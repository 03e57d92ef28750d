"""
Bot performance summary from closed trades plus open positions.

Closed trades contribute their realized profit_loss_pct, open positions their
floating total_return_pct. A return of exactly 0 counts toward the total but
is neither a win nor a loss.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Sequence

from bot_dashboard.core.types import pct_or_zero, record_value, require_sequence


def filter_live(records: Sequence[Any], live_only: bool) -> List[Any]:
    """Keep only real-money records when live_only is set."""
    records = require_sequence(records, "records")
    if not live_only:
        return list(records)
    return [r for r in records if record_value(r, "is_live")]


def _item_pcts(completed_trades: Sequence[Any], open_positions: Sequence[Any]) -> List[float]:
    completed_trades = require_sequence(completed_trades, "completed_trades")
    open_positions = require_sequence(open_positions, "open_positions")
    return (
        [pct_or_zero(record_value(t, "profit_loss_pct")) for t in completed_trades]
        + [pct_or_zero(record_value(p, "total_return_pct")) for p in open_positions]
    )


def enrich_performance(
    perf: Optional[Mapping[str, Any]],
    completed_trades: Sequence[Any],
    open_positions: Sequence[Any],
) -> Dict[str, Any]:
    """
    Return a copy of perf with win_rate, wins, losses, avg_win_pct,
    avg_loss_pct, risk_reward and total_trades recomputed. Other keys pass
    through. With no items at all, win_rate keeps perf's value (or 0).
    risk_reward is inf when there are wins but no losses.
    """
    if perf is not None and not isinstance(perf, Mapping):
        raise TypeError(f"perf must be a mapping or None, got {type(perf).__name__}")
    out: Dict[str, Any] = dict(perf or {})
    pcts = _item_pcts(completed_trades, open_positions)
    total = len(pcts)
    win_pcts = [p for p in pcts if p > 0]
    loss_pcts = [p for p in pcts if p < 0]

    if total > 0:
        win_rate = len(win_pcts) / total * 100.0
    else:
        win_rate = out.get("win_rate") or 0.0
    avg_win = sum(win_pcts) / len(win_pcts) if win_pcts else 0.0
    avg_loss = abs(sum(loss_pcts) / len(loss_pcts)) if loss_pcts else 0.0
    if avg_loss > 0:
        risk_reward = avg_win / avg_loss
    elif avg_win > 0:
        risk_reward = float("inf")
    else:
        risk_reward = 0.0

    out.update(
        win_rate=win_rate,
        wins=len(win_pcts),
        losses=len(loss_pcts),
        avg_win_pct=avg_win,
        avg_loss_pct=avg_loss,
        risk_reward=risk_reward,
        total_trades=total,
    )
    return out


def _qty(record: Any) -> float:
    # quantity 0 or missing means one share
    return float(record_value(record, "quantity") or 1)


def live_performance(
    positions: Sequence[Any],
    trades: Sequence[Any],
    perf: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Portfolio view of a bot: money totals plus the enriched win/loss stats,
    layered over the server-side perf object when one is given. The server
    win_rate covers a different record set, so with no items it resets to 0."""
    positions = require_sequence(positions, "positions")
    trades = require_sequence(trades, "trades")
    invested = sum(float(record_value(p, "avg_price") or 0) * _qty(p) for p in positions)
    current_value = sum(float(record_value(p, "current_price") or 0) * _qty(p) for p in positions)
    unrealized = current_value - invested
    realized = sum(float(record_value(t, "profit_loss") or 0) for t in trades)
    trade_costs = sum(float(record_value(t, "buy_price") or 0) * _qty(t) for t in trades)
    total_gain = unrealized + realized
    total_invested = invested + trade_costs
    pcts = _item_pcts(trades, positions)

    base = dict(perf or {})
    base.update({
        "open_positions": len(positions),
        "invested_in_positions": invested,
        "current_value": current_value,
        "unrealized_gain": unrealized,
        "total_return_pct": unrealized / invested * 100.0 if invested > 0 else 0.0,
        "realized_profit": realized,
        "avg_return_per_trade": sum(pcts) / len(pcts) if pcts else 0.0,
        "total_gain": total_gain,
        "overall_return_pct": total_gain / total_invested * 100.0 if total_invested > 0 else 0.0,
        "total_buys": len(positions) + len(trades),
        "win_rate": 0.0,
    })
    return enrich_performance(base, trades, positions)
