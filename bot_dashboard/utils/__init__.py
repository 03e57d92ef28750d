"""Utils: formatting for percentages, ratios and countdowns."""

from bot_dashboard.utils.formatting import format_percent, format_ratio, format_countdown

__all__ = ["format_percent", "format_ratio", "format_countdown"]
