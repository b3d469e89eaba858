from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from service.api_server import create_app
from service.api_server.config import ApiSettings


@pytest.fixture(autouse=True)
def _enable_socket(socket_enabled):
    yield


@pytest.fixture()
def settings() -> ApiSettings:
    return ApiSettings(host="testserver", port=9001, request_body_limit=4 * 1024, max_inference_rounds=10)


@pytest.fixture()
def app(settings: ApiSettings) -> TestClient:
    return TestClient(create_app(settings=settings))
