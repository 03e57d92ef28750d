"""Core: config, record types, logging."""

from bot_dashboard.core.config import load_config, Config
from bot_dashboard.core.types import (
    BOTS,
    InvalidRecordError,
    TradeAction,
    TradeRecord,
    PositionRecord,
    record_value,
)
from bot_dashboard.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "BOTS",
    "InvalidRecordError",
    "TradeAction",
    "TradeRecord",
    "PositionRecord",
    "record_value",
    "setup_logging",
]
