import logging
import os
import socket
import sys
from unittest.mock import MagicMock

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from fastapi.testclient import TestClient

from opentracker import logs, tracker as tracker_module
from opentracker.errors import TrackerStartupError
from opentracker.pixel import PIXEL_GIF
from opentracker.schemas.config import TrackerConfig
from opentracker.tracker import Tracker


def test_start_reports_port_in_use():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        port = busy.getsockname()[1]

        tracker = Tracker(TrackerConfig(port=port, domain="localhost", host="127.0.0.1"))
        with pytest.raises(TrackerStartupError) as info:
            tracker.start()

    assert isinstance(info.value.__cause__, OSError)


def test_start_serves_fresh_app_on_bound_socket(monkeypatch):
    serve = MagicMock()
    monkeypatch.setattr(tracker_module, "serve", serve)

    tracker = Tracker(TrackerConfig(port=0, domain="localhost", host="127.0.0.1", path="/p"))
    tracker.start()

    serve.assert_called_once()
    app, sock = serve.call_args[0]
    client = TestClient(app)
    assert client.get("/p?id=s").content == PIXEL_GIF
    assert client.get("/healthz").text == "ok"
    assert sock.fileno() == -1


def test_start_warns_when_forwarding_header_is_trusted(monkeypatch, caplog):
    monkeypatch.setattr(tracker_module, "serve", MagicMock())
    tracker = Tracker(TrackerConfig(port=0, domain="localhost", host="127.0.0.1"))
    with caplog.at_level("WARNING", logger="opentracker.tracker"):
        tracker.start()
    assert any("spoofed" in message for message in caplog.messages)


def test_configure_logging_is_idempotent(monkeypatch, tmp_path):
    monkeypatch.setattr(logs, "_system_handler", logging.NullHandler)
    logger = logging.getLogger(logs.APP_NAME)
    before = list(logger.handlers)
    try:
        logs.configure_logging(str(tmp_path / "tracker.log"))
        added = [h for h in logger.handlers if h not in before]
        logs.configure_logging(str(tmp_path / "tracker.log"))
        assert len(added) == 2
        assert [h for h in logger.handlers if h not in before] == added
        assert logger.level == logging.INFO
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
        logger._opentracker_configured = False
