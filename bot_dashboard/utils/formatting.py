"""Display helpers: percentages, ratios and the poll countdown."""

from __future__ import annotations
import math
from datetime import datetime, timezone
from typing import Optional, Union


def format_percent(value: Optional[float]) -> str:
    """Signed, two decimals: '+1.50%'. '--' when missing."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "--"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_ratio(value: Optional[float]) -> str:
    """Risk/reward or profit factor; infinity shown as '∞'."""
    if value is None:
        return "-"
    if math.isinf(value):
        return "∞"
    return f"{value:.2f}"


def _to_utc(value: Union[datetime, str]) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_countdown(
    next_poll_at: Optional[Union[datetime, str]],
    now: Optional[datetime] = None,
    fallback: str = "-",
) -> str:
    """Time until next poll as M:SS, 'Jetzt...' once due."""
    if not next_poll_at:
        return fallback
    now = _to_utc(now) if now else datetime.now(timezone.utc)
    diff = max(0, math.floor((_to_utc(next_poll_at) - now).total_seconds()))
    if diff == 0:
        return "Jetzt..."
    return f"{diff // 60}:{diff % 60:02d}"
