import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from opentracker import main, settings
from opentracker.errors import TrackerStartupError


@pytest.fixture(autouse=True)
def quiet_setup(monkeypatch):
    monkeypatch.setattr(settings, "load_dotenv", lambda: None)
    monkeypatch.setattr(main, "configure_logging", lambda: None)
    monkeypatch.delenv("TRACKER_TRUSTED_PROXIES", raising=False)


def test_bad_port_is_reported_by_run_not_on_import(monkeypatch, caplog):
    monkeypatch.setenv("TRACKER_PORT", "eighty")

    with caplog.at_level("ERROR", logger="opentracker.main"):
        with pytest.raises(SystemExit) as info:
            main.run()

    assert info.value.code == 1
    assert any("invalid tracker configuration" in message for message in caplog.messages)


def test_startup_failure_exits_with_status_one(monkeypatch):
    monkeypatch.delenv("TRACKER_PORT", raising=False)
    tracker = MagicMock()
    tracker.start.side_effect = TrackerStartupError("port in use")
    monkeypatch.setattr(main, "build_tracker", lambda: tracker)

    with pytest.raises(SystemExit) as info:
        main.run()

    assert info.value.code == 1
    tracker.start.assert_called_once_with()
