"""
KPIs over closed positions: win rate, profit factor, expectancy, max drawdown.
Inputs are percentage returns per trade (e.g. 2.5 = +2.5%).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np

from bot_dashboard.core.types import pct_or_zero, record_value, require_sequence


@dataclass
class TradeStats:
    """Aggregate KPIs for a set of closed positions."""
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    avg_win_pct: float
    avg_loss_pct: float
    risk_reward: float
    profit_factor: float
    total_pnl: float
    return_on_invested_pct: float
    avg_return_pct: float
    best_pct: float
    worst_pct: float
    max_drawdown_pct: float


def win_rate(pcts: List[float]) -> float:
    """Percent of trades with positive return."""
    if not pcts:
        return 0.0
    return sum(1 for p in pcts if p > 0) / len(pcts) * 100.0


def profit_factor(amounts: List[float]) -> float:
    """Gross profit / gross loss. inf with wins but no losses, 0 if nothing won."""
    wins = sum(a for a in amounts if a > 0)
    losses = sum(-a for a in amounts if a < 0)
    if losses <= 0:
        return float("inf") if wins > 0 else 0.0
    return wins / losses


def expectancy(pcts: List[float]) -> float:
    """Average return per trade."""
    if not pcts:
        return 0.0
    return sum(pcts) / len(pcts)


def max_drawdown_pct(pcts: List[float]) -> float:
    """Largest peak-to-trough drop (positive percent) of the compounded equity curve."""
    if not pcts:
        return 0.0
    equity = 100.0 * np.cumprod(1.0 + np.asarray(pcts, dtype=float) / 100.0)
    peak = np.maximum.accumulate(np.concatenate(([100.0], equity)))[1:]
    dd = (peak - equity) / peak * 100.0
    return float(max(0.0, dd.max()))


def _amount(p: Any) -> float:
    value = record_value(p, "profit_loss_amt")
    if value is None:
        value = record_value(p, "profit_loss")
    return float(value or 0)


def _invested(p: Any) -> float:
    value = record_value(p, "invested_amount")
    if value is None:
        value = float(record_value(p, "buy_price") or 0) * float(record_value(p, "quantity") or 1)
    return float(value or 0)


def compute_trade_stats(positions: Sequence[Any]) -> Optional[TradeStats]:
    """
    Stats over positions that are closed or carry a profit_loss_pct. Works on
    daytrading positions (profit_loss_amt, invested_amount, close_time) and on
    completed bot trades (profit_loss, buy_price * quantity, sell_date).
    Here a return of exactly 0 counts as a loss. Drawdown follows closed
    positions in close_time order. Returns None for an empty input.
    """
    positions = require_sequence(positions, "positions")
    if not positions:
        return None
    rows = [p for p in positions if record_value(p, "is_closed") or record_value(p, "profit_loss_pct") is not None]
    pcts = [pct_or_zero(record_value(p, "profit_loss_pct")) for p in rows]
    amounts = [_amount(p) for p in rows]
    invested = sum(_invested(p) for p in rows)

    win_pcts = [p for p in pcts if p > 0]
    loss_pcts = [p for p in pcts if p <= 0]
    avg_win = sum(win_pcts) / len(win_pcts) if win_pcts else 0.0
    avg_loss = sum(loss_pcts) / len(loss_pcts) if loss_pcts else 0.0
    gross_win = sum(a for a, p in zip(amounts, pcts) if p > 0)
    gross_loss = abs(sum(a for a, p in zip(amounts, pcts) if p <= 0))
    if gross_loss > 0:
        pf = gross_win / gross_loss
    else:
        pf = float("inf") if gross_win > 0 else 0.0
    total_pnl = sum(amounts)

    closed = sorted(
        (p for p in positions if record_value(p, "is_closed") or record_value(p, "sell_date")),
        key=lambda p: str(record_value(p, "close_time") or record_value(p, "sell_date") or ""),
    )
    return TradeStats(
        total_trades=len(rows),
        winning_trades=len(win_pcts),
        losing_trades=len(loss_pcts),
        win_rate=win_rate(pcts),
        avg_win_pct=avg_win,
        avg_loss_pct=avg_loss,
        risk_reward=abs(avg_win / avg_loss) if avg_loss != 0 else 0.0,
        profit_factor=pf,
        total_pnl=total_pnl,
        return_on_invested_pct=total_pnl / invested * 100.0 if invested > 0 else 0.0,
        avg_return_pct=expectancy(pcts),
        best_pct=max(pcts) if pcts else 0.0,
        worst_pct=min(pcts) if pcts else 0.0,
        max_drawdown_pct=max_drawdown_pct(
            [pct_or_zero(record_value(p, "profit_loss_pct")) for p in closed]
        ),
    )
