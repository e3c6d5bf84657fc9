import logging

from salary_estimator.log import setup_logging


def test_level_from_argument_and_env(monkeypatch):
    root = logging.getLogger()
    saved = root.level
    try:
        assert setup_logging("debug") == logging.DEBUG
        assert root.level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.WARNING

        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert setup_logging() == logging.ERROR

        assert setup_logging("chatty") == logging.INFO
    finally:
        root.setLevel(saved)
