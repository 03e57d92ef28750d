"""Unit tests for core.logger."""

import logging

from bot_dashboard.core.logger import setup_logging


def test_token_redacted_from_child_logger(capsys):
    setup_logging("INFO", secrets=["s3cr3t-token"])
    logging.getLogger("bot_dashboard.api").info("sending Authorization: Bearer abc.def")
    logging.getLogger("bot_dashboard.api").warning("token %s rejected", "s3cr3t-token")
    err = capsys.readouterr().err
    assert "abc.def" not in err
    assert "s3cr3t-token" not in err
    assert "Bearer ***" in err
    assert "token *** rejected" in err


def test_log_file_and_level(tmp_path):
    logger = setup_logging("debug", log_dir=tmp_path / "logs", log_file="dash.log")
    logging.getLogger("bot_dashboard.analytics").debug("grouped %d trades", 3)
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert "grouped 3 trades" in (tmp_path / "logs" / "dash.log").read_text(encoding="utf-8")
    setup_logging("INFO")
    assert logging.getLogger("urllib3").level == logging.WARNING
