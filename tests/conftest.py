from __future__ import annotations

import os
from pathlib import Path

import pytest
from pytest_socket import disable_socket, enable_socket, socket_allow_hosts

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _disable_network(request: pytest.FixtureRequest):
    """Restrict network access while allowing opt-in socket usage."""

    if os.getenv("PYTEST_ALLOW_NETWORK", "0") == "1":
        yield
        return

    allow_marker = request.node.get_closest_marker(
        "enable_socket"
    ) or request.node.get_closest_marker("network")
    socket_allow_hosts(["127.0.0.1", "::1"])

    if allow_marker:
        enable_socket()
        try:
            yield
        finally:
            disable_socket()
    else:
        disable_socket()
        try:
            yield
        finally:
            enable_socket()


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def people_definitions() -> Path:
    return FIXTURES / "people.yml"
