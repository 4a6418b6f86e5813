"""Shared test fixtures for the lightconsole test suite.

Provides fake lighting bridges: a MockTransport-backed dispatcher
factory that records every request, and a FastAPI stand-in for the
real bridge.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from lightconsole.dispatch.http_backend import HttpCommandDispatcher

BRIDGE_URL = "http://bridge.test"

Handler = Callable[[httpx.Request], Any]


# ---------------------------------------------------------------------------
# MockTransport Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Every request seen by the mock bridge, in arrival order."""
    return []


@pytest.fixture
def make_dispatcher(
    recorded_requests: list[httpx.Request],
) -> Callable[..., HttpCommandDispatcher]:
    """Build an HttpCommandDispatcher whose requests go to ``handler``.

    ``handler`` may be sync or async, and may raise httpx errors to
    simulate transport failures.
    """

    def _make(handler: Handler, timeout: float | None = None) -> HttpCommandDispatcher:
        def record(request: httpx.Request) -> Any:
            recorded_requests.append(request)
            return handler(request)

        return HttpCommandDispatcher(
            base_url=BRIDGE_URL,
            timeout=timeout,
            transport=httpx.MockTransport(record),
        )

    return _make


@pytest.fixture
def ok_handler() -> Callable[..., Handler]:
    """Factory for handlers answering every request with ``{"results": results}``."""

    def _make(results: Any = "ok") -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"results": results})

        return handler

    return _make


# ---------------------------------------------------------------------------
# Stand-in Bridge
# ---------------------------------------------------------------------------


def create_bridge_app(failing: set[str] | None = None) -> FastAPI:
    """A minimal lighting bridge exposing the four command routes.

    Like the real bridge, every command answers 200 with ``{}``. Names
    in ``failing`` answer 500 with a plain-text body instead. Every call
    is appended to ``app.state.calls`` as ``(method, path, body)``.
    """
    failing = failing or set()
    app = FastAPI(title="stand-in lighting bridge")
    app.state.calls = []

    @app.post("/api/{name}")
    async def press(name: str, request: Request):
        body = await request.body()
        app.state.calls.append((request.method, request.url.path, body))
        if name in failing:
            return PlainTextResponse("companion unreachable", status_code=500)
        return JSONResponse({})

    return app


@pytest.fixture
def bridge_factory() -> Callable[..., FastAPI]:
    return create_bridge_app


@pytest.fixture
def bridge_app() -> FastAPI:
    return create_bridge_app()
