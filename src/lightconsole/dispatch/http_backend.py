"""HTTP command dispatcher.

Sends operator actions as bodiless POST requests to the lighting bridge.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from lightconsole.dispatch.base import (
    CommandDispatcher,
    DecodeError,
    DispatchError,
    DispatchTimeout,
    TransportError,
)
from lightconsole.domain.models import Action, DispatchResult

logger = logging.getLogger(__name__)


class HttpCommandDispatcher(CommandDispatcher):
    """Dispatches actions to the lighting bridge over HTTP."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:7007",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the HTTP client.

        The bridge has no health route, so nothing is sent here.
        """
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        logger.info("Using lighting bridge at %s", self._base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from lighting bridge")

    async def dispatch(
        self, action: Action | str, *, timeout: float | None = None
    ) -> DispatchResult:
        """POST the action to its endpoint and return the ``results`` payload."""
        action = Action(action)
        if self._client is None:
            raise DispatchError("Not connected to lighting bridge", action=action)
        logger.debug("Dispatching %s to %s", action.value, action.endpoint)
        if timeout is None:
            return await self._send(self._client, action)
        try:
            return await asyncio.wait_for(self._send(self._client, action), timeout)
        except asyncio.TimeoutError as e:
            raise DispatchTimeout(
                f"{action.endpoint} did not respond within {timeout}s", action=action
            ) from e

    async def _send(self, client: httpx.AsyncClient, action: Action) -> DispatchResult:
        path = action.endpoint
        try:
            resp = await client.post(path)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise DispatchTimeout(
                f"HTTP request to {path} timed out: {e}", action=action
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP request to {path} failed: {e}",
                action=action,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"HTTP request to {path} failed: {e}", action=action
            ) from e

        try:
            body = resp.json()
        except ValueError as e:
            raise DecodeError(
                f"Response from {path} is not valid JSON: {e}", action=action
            ) from e
        # The bridge answers {} when it has nothing to report.
        if not isinstance(body, dict):
            raise DecodeError(
                f"Response from {path} is not a JSON object", action=action
            )

        results = body.get("results")
        logger.debug("Dispatched %s: results=%r", action.value, results)
        return DispatchResult(action=action, results=results)
