"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from wikiverify.utils.logger import configure_logging, reset_logging


def test_file_handler_written_to_home(tmp_path):
    configure_logging(tmp_path)
    logging.getLogger("wikiverify.test").info("hello")

    handlers = logging.getLogger("wikiverify").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)
    handlers[0].flush()
    assert "hello" in (tmp_path / "wikiverify.log").read_text(encoding="utf-8")


def test_configure_is_idempotent(tmp_path):
    configure_logging(tmp_path)
    configure_logging(tmp_path / "other")

    assert len(logging.getLogger("wikiverify").handlers) == 1
    assert not (tmp_path / "other").exists()


def test_default_home_from_env(wikiverify_home):
    configure_logging()

    assert (wikiverify_home / "wikiverify.log").exists()


def test_reset_detaches_handlers(tmp_path):
    configure_logging(tmp_path)
    reset_logging()

    assert logging.getLogger("wikiverify").handlers == []
