import logging
import sys

import pytest

from xeus_cling_setup.logging import configure_logging, get_logger


def test_get_logger():
    assert get_logger().name == "xeus_cling_setup"
    assert get_logger("session").name == "xeus_cling_setup.session"
    assert get_logger("xeus_cling_setup.docs.fetch").name == "xeus_cling_setup.docs.fetch"


def test_configure_logging(monkeypatch: pytest.MonkeyPatch):
    logger = get_logger()
    configure_logging("debug")
    assert logger.level == logging.DEBUG
    handlers = list(logger.handlers)

    monkeypatch.setenv("XEUS_CLING_SETUP_LOG_LEVEL", "WARNING")
    configure_logging()
    assert logger.level == logging.WARNING
    # The handler is installed only once
    assert logger.handlers == handlers


def test_invalid_level():
    with pytest.raises(ValueError, match="Invalid log_level"):
        configure_logging("VERBOSE")


if __name__ == "__main__":
    pytest.main(sys.argv)
