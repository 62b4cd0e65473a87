"""Tests for the queue-based logging setup and its shutdown."""

import logging
import logging.handlers

import pytest

from common.utils import async_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    async_logging.shutdown_async_logging()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_records_reach_log_file(tmp_path):
    log_file = tmp_path / "collection_manager.log"

    async_logging.setup_async_logging(logging.DEBUG, str(log_file))
    logging.getLogger("collection.test").info("hello from the test")
    async_logging.shutdown_async_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "hello from the test" in content
    assert "collection.test INFO" in content


def test_root_logger_only_has_queue_handler(tmp_path):
    async_logging.setup_async_logging(logging.WARNING, str(tmp_path / "app.log"))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.handlers.QueueHandler)


def test_shutdown_is_idempotent(tmp_path):
    async_logging.setup_async_logging(logging.INFO, str(tmp_path / "app.log"))

    async_logging.shutdown_async_logging()
    async_logging.shutdown_async_logging()

    assert async_logging._queue_listener is None


def test_failed_rollover_keeps_handler_usable(tmp_path, monkeypatch, capsys):
    handler = async_logging.SafeRotatingFileHandler(str(tmp_path / "app.log"), maxBytes=10, backupCount=1)

    def deny(*_args, **_kwargs):
        raise PermissionError("file in use")

    monkeypatch.setattr(logging.handlers.RotatingFileHandler, "doRollover", deny)
    handler.doRollover()
    handler.close()

    assert "Could not rotate log file" in capsys.readouterr().err


def test_console_and_file_handlers_share_format(tmp_path):
    handlers = async_logging._build_handlers(str(tmp_path / "app.log"), 1024, 1, console=True)
    try:
        assert [type(h) for h in handlers] == [async_logging.SafeRotatingFileHandler, logging.StreamHandler]
        assert all(h.formatter._fmt == async_logging.LOG_FORMAT for h in handlers)
    finally:
        for handler in handlers:
            handler.close()


def test_setup_twice_replaces_listener(tmp_path):
    async_logging.setup_async_logging(logging.INFO, str(tmp_path / "first.log"))
    first = async_logging._queue_listener

    async_logging.setup_async_logging(logging.INFO, str(tmp_path / "second.log"))

    assert async_logging._queue_listener is not first
    assert len(logging.getLogger().handlers) == 1
