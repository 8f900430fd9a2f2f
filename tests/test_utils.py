import logging

import pythonjsonlogger.json
import pytest
from rich.logging import RichHandler

from tempest.parser import LogLevel
from tempest.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(restore_root_logger):
    setup_logging(LogLevel.WARNING, mode="cli")
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json(restore_root_logger):
    setup_logging(mode="json")
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)
    assert handler.level == logging.INFO


def test_setup_logging_mode_from_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv("TEMPEST_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)


def test_setup_logging_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "tempest.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    file_handlers = [
        handler
        for handler in restore_root_logger.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    logging.getLogger("tempest").warning("relay stopped")
    file_handlers[0].flush()
    assert "[tempest] [WARNING] relay stopped" in log_file.read_text()


def test_setup_logging_json_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "tempest.json"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    file_handler = next(
        handler
        for handler in restore_root_logger.handlers
        if isinstance(handler, logging.FileHandler)
    )
    assert isinstance(file_handler.formatter, pythonjsonlogger.json.JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_setup_logging_invalid_mode_keeps_handlers(restore_root_logger):
    before = restore_root_logger.handlers[:]
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
    assert restore_root_logger.handlers == before


def test_setup_logging_file_records_debug_at_quiet_rank(tmp_path, restore_root_logger):
    log_file = tmp_path / "tempest.log"
    setup_logging(LogLevel.ERROR, mode="json", log_filename=str(log_file))
    console_handler = restore_root_logger.handlers[0]
    assert console_handler.level == logging.ERROR
    logging.getLogger("tempest").debug("packet received")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "[DEBUG] packet received" in log_file.read_text()
