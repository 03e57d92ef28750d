"""
Logging for the dashboard CLI: one format on stderr and an optional log file,
with the API token masked in every record.
"""

from __future__ import annotations
import logging
import re
import sys
from pathlib import Path
from typing import Iterable, Optional

LOGGER_NAME = "bot_dashboard"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_BEARER = re.compile(r"(Bearer\s+)\S+", re.IGNORECASE)


class RedactTokenFilter(logging.Filter):
    """Replace Bearer credentials and known secrets in the rendered message."""

    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _BEARER.sub(r"\1***", message)
        for secret in self.secrets:
            redacted = redacted.replace(secret, "***")
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
    secrets: Iterable[str] = (),
) -> logging.Logger:
    """
    Configure the bot_dashboard logger and return it. Output goes to stderr so
    the CLI tables on stdout stay clean. urllib3 connection chatter is only
    shown at DEBUG.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(log_level)
    root.handlers.clear()
    logging.getLogger("urllib3").setLevel(logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    redact = RedactTokenFilter(secrets)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(redact)
        root.addHandler(handler)

    return root
