import logging

import pytest

from sportmonks_sdk.infrastructure.monitoring.logger_setup import resolve_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.parametrize("value, expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    (logging.ERROR, logging.ERROR),
    (None, logging.WARNING),
    ("nonsense", logging.WARNING),
])
def test_resolve_log_level(value, expected):
    assert resolve_log_level(value) == expected


def test_setup_logging_with_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "sportmonks.log"

    setup_logging(log_level="info", log_file=str(log_file))
    logging.getLogger("sportmonks_sdk.test").info("hello from test")

    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 2
    assert logging.getLogger("httpx").level == logging.WARNING
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()
