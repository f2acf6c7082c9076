"""
Tests for environment-driven settings (NUMCN_LOG_LEVEL).
"""

from __future__ import annotations

import logging

import pytest

from numcn.settings import DEFAULT_LOG_LEVEL, configure_logging, log_level


@pytest.fixture(autouse=True)
def _restore_numcn_level():
    """configure_logging() mutates the package logger — put it back afterwards."""
    numcn_logger = logging.getLogger("numcn")
    saved = numcn_logger.level
    yield
    numcn_logger.setLevel(saved)


class TestLogLevel:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("NUMCN_LOG_LEVEL", raising=False)
        assert log_level() == logging.getLevelName(DEFAULT_LOG_LEVEL)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NUMCN_LOG_LEVEL", "debug")
        assert log_level() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("NUMCN_LOG_LEVEL", "LOUD")
        with caplog.at_level(logging.WARNING, logger="numcn.settings"):
            assert log_level() == logging.WARNING
        assert "Unknown NUMCN_LOG_LEVEL" in caplog.text


class TestConfigureLogging:
    def test_applies_level_to_package_logger(self, monkeypatch):
        monkeypatch.setenv("NUMCN_LOG_LEVEL", "INFO")
        assert configure_logging() == logging.INFO
        assert logging.getLogger("numcn").level == logging.INFO
        assert logging.getLogger("numcn.converter").getEffectiveLevel() == logging.INFO

    def test_dotenv_file_feeds_level(self, monkeypatch, tmp_path):
        from dotenv import load_dotenv

        monkeypatch.delenv("NUMCN_LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("NUMCN_LOG_LEVEL=ERROR\n")
        load_dotenv(env_file)
        assert configure_logging() == logging.ERROR
