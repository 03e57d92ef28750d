#!/usr/bin/env python3
"""
Bot Dashboard CLI: summary | trades | stats
Usage:
  python main.py summary [--bot ditz] [--live] [--simulated] [--config config.yaml]
  python main.py trades [--bot ditz] [--live] [--sort profit_loss_pct] [--asc]
  python main.py stats [--bot ditz] [--live]
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bot_dashboard.analytics.grouping import sort_trades
from bot_dashboard.api.client import HttpBotApiClient
from bot_dashboard.api.exceptions import ApiError
from bot_dashboard.api.snapshot import BotSnapshot, fetch_snapshot
from bot_dashboard.core.config import load_config
from bot_dashboard.core.logger import setup_logging
from bot_dashboard.core.types import BOTS
from bot_dashboard.utils.formatting import format_percent, format_ratio

logger = logging.getLogger("bot_dashboard")


def trades_frame(trades) -> pd.DataFrame:
    """Table of trade records in the given order."""
    rows = []
    for t in trades:
        rows.append({
            "id": t.id,
            "symbol": t.symbol,
            "action": getattr(t.action, "value", t.action),
            "price": t.price,
            "p/l": format_percent(t.profit_loss_pct) if t.profit_loss_pct is not None else "",
            "live": "yes" if t.is_live else "",
            "time": t.timestamp or "",
        })
    return pd.DataFrame(rows, columns=["id", "symbol", "action", "price", "p/l", "live", "time"])


def print_summary(snap: BotSnapshot) -> None:
    p = snap.performance
    mode = "live" if snap.live_only else ("simulated" if snap.simulated else "all")
    print(f"\n--- {snap.bot} performance ({mode}) ---")
    print(f"Open positions: {p['open_positions']}  Invested: {p['invested_in_positions']:.2f}  Value: {p['current_value']:.2f}")
    print(f"Unrealized: {p['unrealized_gain']:.2f} ({format_percent(p['total_return_pct'])})  Realized: {p['realized_profit']:.2f}")
    print(f"Overall return: {format_percent(p['overall_return_pct'])}")
    print(f"Trades: {p['total_trades']} (wins: {p['wins']}, losses: {p['losses']})  Win rate: {p['win_rate']:.1f}%")
    print(f"Avg win: {format_percent(p['avg_win_pct'])}  Avg loss: -{p['avg_loss_pct']:.2f}%  R/R: {format_ratio(p['risk_reward'])}")


def print_trade_stats(snap: BotSnapshot) -> None:
    s = snap.trade_stats
    if s is None:
        print(f"No completed trades for {snap.bot}.")
        return
    print(f"\n--- {snap.bot} completed trades ---")
    print(f"Trades: {s.total_trades} (wins: {s.winning_trades}, losses: {s.losing_trades})  Win rate: {s.win_rate:.1f}%")
    print(f"Avg win: {format_percent(s.avg_win_pct)}  Avg loss: {format_percent(s.avg_loss_pct)}  R/R: {format_ratio(s.risk_reward)}")
    print(f"Profit factor: {format_ratio(s.profit_factor)}  P/L: {s.total_pnl:.2f} ({format_percent(s.return_on_invested_pct)})")
    print(f"Best: {format_percent(s.best_pct)}  Worst: {format_percent(s.worst_pct)}  Max drawdown: {s.max_drawdown_pct:.2f}%")


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file, secrets=[config.api_token])
    bot = args.bot or config.bot
    live_only = args.live or config.live_only
    client = HttpBotApiClient(
        config.api_base_url,
        config.api_token,
        timeout=config.api_timeout,
        max_retries=config.api_max_retries,
    )
    try:
        snap = fetch_snapshot(client, bot, live_only=live_only, simulated=args.simulated)
    except ApiError as e:
        logger.error("Failed to fetch %s data: %s", bot, e)
        return 1
    finally:
        client.close()

    if args.mode == "summary":
        print_summary(snap)
        return 0
    if args.mode == "stats":
        print_trade_stats(snap)
        return 0
    trades = snap.grouped_actions
    if args.sort:
        trades = sort_trades(trades, args.sort, descending=not args.asc)
    df = trades_frame(trades)
    if df.empty:
        print(f"No trades for {bot}.")
    else:
        print(df.to_string(index=False))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Bot Dashboard CLI")
    parser.add_argument("mode", choices=["summary", "trades", "stats"], help="Performance summary, grouped trade list or completed-trade KPIs")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--bot", choices=BOTS, default=None, help="Bot to inspect (default from config)")
    parser.add_argument("--live", action="store_true", help="Only real-money positions and trades")
    parser.add_argument("--simulated", action="store_true", help="Use simulated portfolio/performance endpoints")
    parser.add_argument("--sort", default=None, help="Sort trades by field instead of SELL/BUY pairing")
    parser.add_argument("--asc", action="store_true", help="Ascending sort")
    return run(parser.parse_args())


if __name__ == "__main__":
    sys.exit(main())
