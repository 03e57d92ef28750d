"""Analytics: trade pairing, performance summary, closed-trade KPIs."""

from bot_dashboard.analytics.grouping import group_trades, sort_trades
from bot_dashboard.analytics.performance import (
    enrich_performance,
    filter_live,
    live_performance,
)
from bot_dashboard.analytics.metrics import (
    TradeStats,
    compute_trade_stats,
    win_rate,
    profit_factor,
    expectancy,
    max_drawdown_pct,
)

__all__ = [
    "group_trades",
    "sort_trades",
    "enrich_performance",
    "filter_live",
    "live_performance",
    "TradeStats",
    "compute_trade_stats",
    "win_rate",
    "profit_factor",
    "expectancy",
    "max_drawdown_pct",
]
