"""Domain layer: constants, errors and schemas."""

from .errors import DispatchError, ErrorCodes
from .schemas import (
    Bindings,
    DispatchFailed,
    Dispatched,
    DispatchOutcome,
    ExecutionContext,
)

__all__ = [
    "DispatchError",
    "ErrorCodes",
    "Bindings",
    "ExecutionContext",
    "Dispatched",
    "DispatchFailed",
    "DispatchOutcome",
]
