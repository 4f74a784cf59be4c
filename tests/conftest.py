from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

os.environ["USC_ENV"] = "test"
os.environ["USC_HOST"] = "127.0.0.1"
os.environ.setdefault("USC_LOG_LEVEL", "WARNING")


@pytest.fixture()
def client() -> TestClient:
    from uscurrency.main import app

    with TestClient(app) as c:
        yield c
