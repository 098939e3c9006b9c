import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from fastapi.testclient import TestClient
from opentracker.main import create_default_app


def test_healthz():
    client = TestClient(create_default_app())
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.text == "ok"


def test_default_app_serves_pixel():
    client = TestClient(create_default_app())
    resp = client.get("/pixel?id=smoke")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/gif"
