from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from yash.core import logging_setup


@pytest.fixture
def package_logger():
    logger = logging.getLogger("yash")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    formatter = logging_setup.JsonFormatter()
    record = logging.LogRecord(
        name="yash.services.loader",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="loaded %s",
        args=("database.yml",),
        exc_info=None,
    )
    record.source_key = "database.yml"
    payload = json.loads(formatter.format(record))

    assert payload["message"] == "loaded database.yml"
    assert payload["logger"] == "yash.services.loader"
    assert payload["source_key"] == "database.yml"
    assert payload["timestamp"].endswith("Z")


def test_configure_logging_attaches_handler_to_package_logger(
    monkeypatch: pytest.MonkeyPatch, package_logger: logging.Logger
) -> None:
    stream = StringIO()

    class StubStreamHandler(logging.StreamHandler):
        def __init__(self) -> None:
            super().__init__(stream=stream)

    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)
    monkeypatch.setattr(logging, "StreamHandler", StubStreamHandler)

    root_handlers = list(logging.getLogger().handlers)
    logging_setup.configure_logging({"level": "DEBUG"})

    logging.getLogger("yash.services.cache").debug("cached", extra={"source_key": "a.yml"})

    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["source_key"] == "a.yml"
    assert package_logger.level == logging.DEBUG
    assert logging_setup._handler is not None
    assert logging.getLogger().handlers == root_handlers


def test_configure_logging_reads_env_level(
    monkeypatch: pytest.MonkeyPatch, package_logger: logging.Logger
) -> None:
    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)
    monkeypatch.setenv("YASH_LOG_LEVEL", "info")

    logging_setup.configure_logging()

    assert package_logger.level == logging.INFO


def test_set_runtime_level_updates_handler(
    monkeypatch: pytest.MonkeyPatch, package_logger: logging.Logger
) -> None:
    handler = logging.StreamHandler(stream=StringIO())
    monkeypatch.setattr(logging_setup, "_handler", handler, raising=False)

    logging_setup.set_runtime_level("WARNING")
    assert handler.level == logging.WARNING
    assert package_logger.level == logging.WARNING

    with pytest.raises(ValueError):
        logging_setup.set_runtime_level("not-a-level")
