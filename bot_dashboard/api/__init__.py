"""API: dashboard backend client and bot snapshots."""

from bot_dashboard.api.client import BotApiClient, HttpBotApiClient
from bot_dashboard.api.exceptions import ApiError, AuthenticationError, RateLimitError
from bot_dashboard.api.snapshot import BotSnapshot, fetch_snapshot

__all__ = [
    "BotApiClient",
    "HttpBotApiClient",
    "ApiError",
    "AuthenticationError",
    "RateLimitError",
    "BotSnapshot",
    "fetch_snapshot",
]
