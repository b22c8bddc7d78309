import json
import logging
import pathlib
import sys

import pytest
import structlog

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meldsolver.logging import _serialize_enums, setup_logging
from meldsolver.rules import SearchMode
from meldsolver.session import DrawSession


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """Close and remove all handlers from the root logger after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


def test_configures_single_stream_handler(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    setup_logging()
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    setup_logging(level=logging.WARNING)
    assert logging.getLogger().level == logging.WARNING


def test_invalid_settings_raise(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValueError):
        setup_logging()
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        setup_logging()


def test_json_output(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    setup_logging()

    structlog.get_logger("meldsolver.test").info("winning hand", mode=SearchMode.EXHAUSTIVE, hand_size=9)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "winning hand"
    assert record["mode"] == "exhaustive"
    assert record["hand_size"] == 9
    assert record["level"] == "info"


def test_serialize_enums_replaces_values():
    event = _serialize_enums(None, "info", {"mode": SearchMode.GREEDY, "count": 3})
    assert event == {"mode": "greedy", "count": 3}


def test_library_logging_is_quiet_until_configured(capsys):
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)
    session = DrawSession(rng_seed=5)
    session.step()
    session.memo.clear()

    captured = capsys.readouterr()
    assert "tile drawn" not in captured.out + captured.err
    assert "memo cleared" not in captured.out + captured.err


def test_draw_events_reach_configured_handler(monkeypatch, capsys):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    setup_logging(level=logging.DEBUG)
    DrawSession(rng_seed=5).step()

    assert "tile drawn" in capsys.readouterr().err
