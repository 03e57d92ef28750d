"""
HTTP client for the bot backend (portfolio, actions, completed trades, performance)
with retry on rate limiting.
"""

from __future__ import annotations
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, List

import requests

from bot_dashboard.api.exceptions import ApiError, AuthenticationError, RateLimitError
from bot_dashboard.core.types import BOTS

logger = logging.getLogger("bot_dashboard.api")


def retry_on_rate_limit(max_retries: int = 3, base_delay: float = 1.0):
    """Decorator: retry on RateLimitError with exponential backoff."""
    def decorator(f):
        def wrapped(self, *args, **kwargs):
            retries = getattr(self, "max_retries", max_retries)
            last_exc = None
            for attempt in range(max(1, retries)):
                try:
                    return f(self, *args, **kwargs)
                except RateLimitError as e:
                    last_exc = e
                    if attempt < retries - 1:
                        delay = base_delay * (2 ** attempt)
                        logger.warning("Rate limited, retry in %.1fs (attempt %d)", delay, attempt + 1)
                        time.sleep(delay)
                    else:
                        raise
            raise last_exc
        return wrapped
    return decorator


def _check_bot(bot: str) -> str:
    if bot not in BOTS:
        raise ValueError(f"Unknown bot '{bot}', expected one of: {', '.join(BOTS)}")
    return bot


class BotApiClient(ABC):
    """Read access to one backend's bot data. Payloads are raw JSON (lists/dicts)."""

    @abstractmethod
    def get_portfolio(self, bot: str) -> dict:
        """Portfolio object with a 'positions' list."""
        pass

    @abstractmethod
    def get_actions(self, bot: str) -> List[dict]:
        """Recent BUY/SELL actions."""
        pass

    @abstractmethod
    def get_completed_trades(self, bot: str) -> List[dict]:
        """Closed round trips with profit_loss_pct."""
        pass

    @abstractmethod
    def get_performance(self, bot: str) -> dict:
        """Server-side performance object."""
        pass

    def get_all_actions(self, bot: str) -> List[dict]:
        """Full action history. Defaults to get_actions."""
        return self.get_actions(bot)

    def get_simulated_portfolio(self, bot: str) -> dict:
        return self.get_portfolio(bot)

    def get_simulated_performance(self, bot: str) -> dict:
        return self.get_performance(bot)


class HttpBotApiClient(BotApiClient):
    """requests-based client using Bearer token auth."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 10.0,
        max_retries: int = 3,
        session: requests.Session = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/json"
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"
        else:
            logger.info("No API token configured, requests are unauthenticated")

    def close(self) -> None:
        self._session.close()

    @retry_on_rate_limit()
    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(0, f"GET {path} failed: {e}") from e
        if r.status_code in (401, 403):
            raise AuthenticationError(r.status_code, f"GET {path} not authorized")
        if r.status_code == 429:
            raise RateLimitError(429, f"GET {path} rate limited")
        if r.status_code >= 400:
            raise ApiError(r.status_code, f"GET {path}: {r.text[:200]}")
        try:
            return r.json()
        except ValueError as e:
            raise ApiError(r.status_code, f"GET {path} returned invalid JSON") from e

    def _get_list(self, bot: str, endpoint: str) -> List[dict]:
        data = self._get(f"/api/{_check_bot(bot)}/{endpoint}")
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(200, f"/api/{bot}/{endpoint}: expected a list, got {type(data).__name__}", data)
        logger.debug("%s/%s: %d records", bot, endpoint, len(data))
        return data

    def _get_object(self, bot: str, endpoint: str) -> dict:
        data = self._get(f"/api/{_check_bot(bot)}/{endpoint}")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ApiError(200, f"/api/{bot}/{endpoint}: expected an object, got {type(data).__name__}", data)
        return data

    def get_portfolio(self, bot: str) -> dict:
        return self._get_object(bot, "portfolio")

    def get_actions(self, bot: str) -> List[dict]:
        return self._get_list(bot, "actions")

    def get_all_actions(self, bot: str) -> List[dict]:
        return self._get_list(bot, "actions-all")

    def get_completed_trades(self, bot: str) -> List[dict]:
        return self._get_list(bot, "completed-trades")

    def get_performance(self, bot: str) -> dict:
        return self._get_object(bot, "performance")

    def get_simulated_portfolio(self, bot: str) -> dict:
        return self._get_object(bot, "simulated-portfolio")

    def get_simulated_performance(self, bot: str) -> dict:
        return self._get_object(bot, "simulated-performance")
