"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from todotree.mutations import move_node
from todotree.parser import parse_outline
from todotree.utils.logging_config import ExtraFieldsFormatter, configure_logging, get_logger


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("todotree.test", logging.INFO, __file__, 1, "Saved outline", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extra_fields() -> None:
    formatter = ExtraFieldsFormatter("%(message)s")

    assert formatter.format(_record(user_id="u1", chars=4)) == "Saved outline [chars=4 user_id='u1']"


def test_formatter_without_extras() -> None:
    formatter = ExtraFieldsFormatter("%(message)s")

    assert formatter.format(_record()) == "Saved outline"


def test_get_logger_leaves_handlers_alone() -> None:
    logger = get_logger("todotree.something")

    assert logger.name == "todotree.something"
    assert logger.handlers == []


@pytest.fixture
def package_levels():
    loggers = [logging.getLogger(name) for name in ("todotree", "server")]
    levels = [logger.level for logger in loggers]
    yield
    for logger, level in zip(loggers, levels):
        logger.setLevel(level)


@pytest.mark.usefixtures("package_levels")
def test_configure_logging_installs_root_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    package_logger = logging.getLogger("todotree")

    configure_logging("DEBUG")

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ExtraFieldsFormatter)
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate


def test_configure_logging_keeps_existing_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    configure_logging()

    assert root.handlers == [existing]


def test_engine_logs_reach_caplog_after_configuration(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging()
    caplog.set_level(logging.DEBUG, logger="todotree")
    forest = parse_outline("A\n    a1\n")

    move_node(forest, "item-0", "item-1", 0)

    assert "lies inside the subtree" in caplog.text
