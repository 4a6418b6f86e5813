"""Abstract base class for command dispatch.

A dispatcher turns one operator Action into exactly one command against
the lighting bridge. Backends implement ``dispatch()``, which fails
outward on any transport or decode problem; the base class builds the
result-typed ``try_dispatch()`` and the concurrent ``dispatch_many()``
on top of it.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from lightconsole.domain.models import (
    Action,
    DispatchFailure,
    DispatchOutcome,
    DispatchResult,
    FailureKind,
)

logger = logging.getLogger(__name__)


class CommandDispatcher(ABC):
    """Abstract interface for sending operator actions to the bridge.

    Example usage::

        async with HttpCommandDispatcher(base_url="http://127.0.0.1:7007") as d:
            result = await d.dispatch(Action.FTB)
            outcome = await d.try_dispatch("dsk", timeout=2.0)
            if not outcome.ok:
                print(outcome.message)
    """

    @abstractmethod
    async def connect(self) -> None:
        """Prepare the transport. Must be called before dispatching."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the transport. Safe to call multiple times."""
        ...

    @abstractmethod
    async def dispatch(
        self, action: Action | str, *, timeout: float | None = None
    ) -> DispatchResult:
        """Send one action and return the bridge's ``results`` payload.

        Args:
            action: One of the closed set of actions, or its identifier.
            timeout: Optional budget in seconds for the whole call. When
                     None, no timeout is enforced by the dispatcher.

        Raises:
            ValueError: If ``action`` is not a member of the action set.
            TransportError: If the bridge is unreachable or answers with a
                            non-success status.
            DispatchTimeout: If ``timeout`` elapses first.
            DecodeError: If the response is not JSON with a ``results`` field.
        """
        ...

    async def try_dispatch(
        self, action: Action | str, *, timeout: float | None = None
    ) -> DispatchOutcome:
        """Dispatch an action, returning failures as a DispatchFailure.

        An action outside the action set still raises ValueError.
        """
        action = Action(action)
        try:
            return await self.dispatch(action, timeout=timeout)
        except DispatchError as e:
            logger.warning("Dispatch of %s failed: %s", action.value, e)
            return e.to_failure(action)

    async def dispatch_many(
        self, actions: Iterable[Action | str], *, timeout: float | None = None
    ) -> list[DispatchOutcome]:
        """Dispatch several actions concurrently.

        Outcomes are returned in the order the actions were given; the
        requests themselves are not ordered. A failed action does not
        affect the others.
        """
        resolved = [Action(a) for a in actions]
        return list(
            await asyncio.gather(
                *(self.try_dispatch(a, timeout=timeout) for a in resolved)
            )
        )

    async def __aenter__(self) -> CommandDispatcher:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()


class DispatchError(Exception):
    """Raised when a dispatch cannot produce a result."""

    kind: FailureKind = FailureKind.TRANSPORT

    def __init__(self, message: str, action: Action | None = None) -> None:
        super().__init__(message)
        self.action = action

    def to_failure(self, action: Action) -> DispatchFailure:
        return DispatchFailure(
            action=self.action or action,
            kind=self.kind,
            message=str(self),
            status_code=getattr(self, "status_code", None),
        )


class TransportError(DispatchError):
    """The bridge could not be reached or returned a non-success status."""

    def __init__(
        self,
        message: str,
        action: Action | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, action=action)
        self.status_code = status_code


class DispatchTimeout(TransportError):
    """The call did not complete within its timeout."""

    kind = FailureKind.TIMEOUT


class DecodeError(DispatchError):
    """The response body was not JSON carrying a ``results`` field."""

    kind = FailureKind.DECODE
