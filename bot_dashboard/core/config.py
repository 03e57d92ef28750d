"""
Load configuration from config.yaml and .env. The API token only comes from env.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from bot_dashboard.core.types import BOTS


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_bool(key: str, default: bool = False) -> bool:
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes")

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    api = data.get("api", {})
    dashboard = data.get("dashboard", {})
    logging_cfg = data.get("logging", {})

    bot = env("DASHBOARD_BOT", dashboard.get("bot", "ditz")).lower()
    if bot not in BOTS:
        raise ValueError(f"Unknown bot '{bot}', expected one of: {', '.join(BOTS)}")

    return Config(
        api_base_url=env("DASHBOARD_API_URL", api.get("base_url", "http://localhost:8080")).rstrip("/"),
        api_token=env("DASHBOARD_API_TOKEN"),
        api_timeout=env_float("DASHBOARD_API_TIMEOUT", api.get("timeout", 10.0)),
        api_max_retries=env_int("DASHBOARD_API_MAX_RETRIES", api.get("max_retries", 3)),
        bot=bot,
        live_only=env_bool("DASHBOARD_LIVE_ONLY", dashboard.get("live_only", False)),
        log_level=logging_cfg.get("level", "INFO"),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file"),
    )


class Config:
    """Dashboard client configuration. Immutable after load."""

    __slots__ = (
        "api_base_url", "api_token", "api_timeout", "api_max_retries",
        "bot", "live_only",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        api_base_url: str = "http://localhost:8080",
        api_token: str = "",
        api_timeout: float = 10.0,
        api_max_retries: int = 3,
        bot: str = "ditz",
        live_only: bool = False,
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: Optional[str] = None,
    ):
        self.api_base_url = api_base_url
        self.api_token = api_token
        self.api_timeout = api_timeout
        self.api_max_retries = api_max_retries
        self.bot = bot
        self.live_only = live_only
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
