"""Tests for logging configuration."""

import logging

from riverworld.logging_config import LOG_LEVEL_ENV, configure_logging


def test_explicit_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = configure_logging(level="debug", extra_loggers=["riverworld.test.extra"])

    assert logger.name == "riverworld"
    assert logger.level == logging.DEBUG
    assert logging.getLogger("riverworld.test.extra").level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    logger = configure_logging()
    assert logger.level == logging.WARNING


def test_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = configure_logging()
    assert logger.level == logging.INFO
