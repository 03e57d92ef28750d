"""Errors raised by the dashboard API client."""

from __future__ import annotations
from typing import Any, Optional


class ApiError(Exception):
    """Request to the dashboard backend failed. status is 0 for connection errors."""

    def __init__(self, status: int, message: str, response_data: Optional[Any] = None):
        self.status = status
        self.message = message
        self.response_data = response_data
        super().__init__(f"API error {status}: {message}")


class AuthenticationError(ApiError):
    """Missing, expired or non-admin token (401/403)."""


class RateLimitError(ApiError):
    """Backend answered 429."""
