"""Core domain models for the lightconsole system.

These models represent the data flowing through a dispatch: the closed
set of operator actions, and the outcome of sending one of them to the
lighting bridge.
"""

from __future__ import annotations

import enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Action(str, enum.Enum):
    """An operator intent. The set is closed; members never change at runtime."""

    ON = "on"
    OFF = "off"
    FTB = "ftb"
    DSK = "dsk"

    @property
    def label(self) -> str:
        return _ACTION_INFO[self][0]

    @property
    def description(self) -> str:
        return _ACTION_INFO[self][1]

    @property
    def endpoint(self) -> str:
        """Bridge path this action is sent to."""
        return ACTION_ENDPOINTS[self]


class FailureKind(str, enum.Enum):
    """Why a dispatch failed."""

    TRANSPORT = "transport"  # unreachable bridge or non-success status
    DECODE = "decode"  # body is not JSON or has no results field
    TIMEOUT = "timeout"  # caller-supplied timeout elapsed


# Fixed and total: every Action has exactly one endpoint.
ACTION_ENDPOINTS: dict[Action, str] = {
    Action.ON: "/api/on",
    Action.OFF: "/api/off",
    Action.FTB: "/api/ftb",
    Action.DSK: "/api/dsk",
}

_ACTION_INFO: dict[Action, tuple[str, str]] = {
    Action.ON: ("On", "light on."),
    Action.OFF: ("Off", "light off."),
    Action.FTB: ("FTB", "fade to black"),
    Action.DSK: ("DSK", "toggle DSK."),
}


# ---------------------------------------------------------------------------
# Dispatch Outcome Models
# ---------------------------------------------------------------------------


class DispatchResult(BaseModel):
    """A successful dispatch.

    ``results`` is whatever the bridge returned in its ``results`` field,
    forwarded without inspection.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    action: Action = Field(description="The action that was dispatched")
    results: Any = Field(default=None, description="Opaque payload from the bridge")

    @property
    def ok(self) -> bool:
        return True


class DispatchFailure(BaseModel):
    """A failed dispatch, as surfaced to the operator."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    action: Action = Field(description="The action that was dispatched")
    kind: FailureKind = Field(description="Classification of the failure")
    message: str = Field(description="Human-readable failure reason")
    status_code: int | None = Field(
        default=None, description="HTTP status returned by the bridge, if any"
    )

    @property
    def ok(self) -> bool:
        return False


DispatchOutcome = Union[DispatchResult, DispatchFailure]
