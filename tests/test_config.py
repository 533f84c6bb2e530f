import logging

from chatstore.config import configure_logging, settings


def test_configure_logging_sets_package_level(monkeypatch) -> None:
    logger = logging.getLogger("chatstore")
    previous = logger.level
    try:
        assert configure_logging("DEBUG").level == logging.DEBUG

        monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
        assert configure_logging().level == logging.WARNING
    finally:
        logger.setLevel(previous)
