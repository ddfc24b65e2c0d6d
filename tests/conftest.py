"""Shared pytest fixtures for provider, configuration and composition tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import socket
import tempfile
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

import httpx
import pytest
from lib_layered_config import Config

_COVERAGE_BASENAME = ".coverage.mandrill_provider"

API_ERROR_BODY = '{"status":"error","message":"generic fail"}'


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


# ======================== Message fixtures ========================


@pytest.fixture
def full_message() -> dict[str, Any]:
    """A message using every supported field, in the camelCase mapping form."""
    return {
        "from": "no-reply@example.com",
        "to": ["user@example.net", "user@example.org"],
        "cc": ["user2@example.net"],
        "bcc": ["user3@example.net"],
        "replyTo": "info@example.com",
        "subject": "testing, 123...",
        "textBody": "please disregard",
        "htmlBody": "<p>please disregard</p>",
    }


# ======================== Result callback recorder ========================


@dataclass
class ResultRecorder:
    """Callable that records every invocation's positional arguments.

    ``calls == [()]`` means one success; ``calls == [(error,)]`` one failure.
    ``called`` is set on the first invocation, for sends that report from a
    background thread.
    """

    calls: list[tuple[Any, ...]] = field(default_factory=lambda: [])
    called: threading.Event = field(default_factory=threading.Event)

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)
        self.called.set()

    @property
    def error(self) -> Any:
        """The single error reported, or None on success."""
        assert len(self.calls) == 1, f"expected exactly one callback, got {self.calls!r}"
        return self.calls[0][0] if self.calls[0] else None


@pytest.fixture
def result_recorder() -> ResultRecorder:
    """Provide a fresh callback recorder per test."""
    return ResultRecorder()


# ======================== Mock API transport ========================


@dataclass
class MockApi:
    """Scripted Mandrill API for ``httpx.MockTransport``.

    Attributes:
        requests: Every request that reached the transport.
        status_code: Status returned for each request.
        body: Response body text.
        raise_error: When set, the transport raises it instead of responding.
    """

    requests: list[httpx.Request] = field(default_factory=lambda: [])
    status_code: int = 200
    body: str = ""
    raise_error: Callable[[httpx.Request], Exception] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def mock_api() -> MockApi:
    """Provide a Mandrill API double answering 200 with an empty body."""
    return MockApi()


# ======================== Local HTTP server ========================


@dataclass
class CapturedRequest:
    """One request as received by the local test server."""

    method: str
    path: str
    headers: dict[str, str]
    body: bytes


@dataclass
class LocalApiServer:
    """Plain-HTTP server standing in for the Mandrill API."""

    host: str
    port: int
    requests: list[CapturedRequest]
    received: threading.Event
    reply: dict[str, Any]

    def respond_with(self, status_code: int, body: str = "") -> None:
        self.reply["status_code"] = status_code
        self.reply["body"] = body

    @property
    def options(self) -> dict[str, Any]:
        """Provider options pointing at this server over plain HTTP."""
        return {"use_secure_transport": False, "hostname": self.host, "port": self.port}


@pytest.fixture
def local_api_server() -> Iterator[LocalApiServer]:
    """Run a threaded HTTP server on a free local port for the test duration."""
    requests: list[CapturedRequest] = []
    received = threading.Event()
    reply: dict[str, Any] = {"status_code": 200, "body": ""}

    class _Handler(BaseHTTPRequestHandler):
        def do_POST(self) -> None:  # noqa: N802
            length = int(self.headers.get("Content-Length", "0"))
            body = self.rfile.read(length)
            requests.append(
                CapturedRequest(
                    method=self.command,
                    path=self.path,
                    headers={key.lower(): value for key, value in self.headers.items()},
                    body=body,
                )
            )
            payload = str(reply["body"]).encode("utf-8")
            self.send_response(int(reply["status_code"]))
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)
            received.set()

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
            return

    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield LocalApiServer(
            host="127.0.0.1",
            port=server.server_address[1],
            requests=requests,
            received=received,
            reply=reply,
        )
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def closed_port() -> int:
    """Return a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


# ======================== Configuration fixtures ========================


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from mandrill_provider.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def mandrill_ready_config(config_factory: Callable[[dict[str, Any]], Config]) -> Config:
    """Create a Config pre-loaded with a usable ``[mandrill]`` section."""
    return config_factory(
        {
            "mandrill": {
                "api_key": "test-api-key",
                "use_secure_transport": True,
                "hostname": "mandrillapp.com",
                "async_mode": False,
                "ip_pool": "Main Pool",
                "timeout": 10.0,
            }
        }
    )
