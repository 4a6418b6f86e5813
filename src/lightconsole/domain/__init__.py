"""Domain models for lightconsole.

This package contains the operator action set and the dispatch outcome
types. All models use Pydantic v2 for validation and serialization.
"""

from lightconsole.domain.models import (
    ACTION_ENDPOINTS,
    Action,
    DispatchFailure,
    DispatchOutcome,
    DispatchResult,
    FailureKind,
)

__all__ = [
    "ACTION_ENDPOINTS",
    "Action",
    "DispatchFailure",
    "DispatchOutcome",
    "DispatchResult",
    "FailureKind",
]
