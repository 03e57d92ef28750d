"""Fetch one bot's data and derive the display views (grouped actions, performance)."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bot_dashboard.analytics.grouping import group_trades
from bot_dashboard.analytics.metrics import TradeStats, compute_trade_stats
from bot_dashboard.analytics.performance import filter_live, live_performance
from bot_dashboard.api.client import BotApiClient
from bot_dashboard.core.types import PositionRecord, TradeRecord

logger = logging.getLogger("bot_dashboard.api.snapshot")


@dataclass
class BotSnapshot:
    bot: str
    live_only: bool
    simulated: bool
    positions: List[PositionRecord] = field(default_factory=list)
    actions: List[TradeRecord] = field(default_factory=list)
    completed_trades: List[TradeRecord] = field(default_factory=list)
    grouped_actions: List[TradeRecord] = field(default_factory=list)
    server_performance: Dict[str, Any] = field(default_factory=dict)
    performance: Dict[str, Any] = field(default_factory=dict)
    trade_stats: Optional[TradeStats] = None


def fetch_snapshot(
    client: BotApiClient,
    bot: str,
    live_only: bool = False,
    simulated: bool = False,
) -> BotSnapshot:
    """Load positions, actions, completed trades and performance for bot."""
    if simulated:
        portfolio = client.get_simulated_portfolio(bot)
        server_perf = client.get_simulated_performance(bot)
        raw_actions = client.get_all_actions(bot)
    else:
        portfolio = client.get_portfolio(bot)
        server_perf = client.get_performance(bot)
        raw_actions = client.get_actions(bot)
    raw_trades = client.get_completed_trades(bot)

    positions = filter_live(
        [PositionRecord.from_dict(p) for p in portfolio.get("positions") or []], live_only
    )
    actions = filter_live([TradeRecord.from_dict(a) for a in raw_actions], live_only)
    trades = filter_live([TradeRecord.from_dict(t) for t in raw_trades], live_only)
    logger.info(
        "%s: %d positions, %d actions, %d completed trades (live_only=%s)",
        bot, len(positions), len(actions), len(trades), live_only,
    )
    return BotSnapshot(
        bot=bot,
        live_only=live_only,
        simulated=simulated,
        positions=positions,
        actions=actions,
        completed_trades=trades,
        grouped_actions=group_trades(actions),
        server_performance=server_perf,
        performance=live_performance(positions, trades, server_perf),
        trade_stats=compute_trade_stats([t.raw for t in trades]),
    )
