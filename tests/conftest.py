"""Shared test fixtures for the TimeToTravelTo service."""

from __future__ import annotations

import socket
import threading
import time
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server import ListeningServer, app, build_server
from timetotravel.config import ServerConfig


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def free_port() -> int:
    """An unprivileged port that was free a moment ago."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def running_server(free_port: int) -> Iterator[ListeningServer]:
    """A real uvicorn listener on ``free_port`` running in a background thread."""
    server = build_server(ServerConfig(host="127.0.0.1", port=free_port))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            pytest.fail("server did not start")
        time.sleep(0.05)

    yield server

    server.should_exit = True
    thread.join(timeout=10)
