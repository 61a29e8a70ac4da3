"""Core severity-dispatch package."""

from __future__ import annotations

from .chain import ChainBuilder, DispatchResult, HandlerChain, default_chain
from .dispatch import DispatchOutcome, dispatch, dispatch_all
from .errors import (
    ChainConfigurationError,
    DispatchError,
    EscalatedSeverity,
    FailureKind,
    FatalCondition,
    SinkWriteFailure,
    UnhandledMessage,
    UnknownCondition,
)
from .models import LogMessage, Severity

__all__ = [
    "ChainBuilder",
    "ChainConfigurationError",
    "DispatchError",
    "DispatchOutcome",
    "DispatchResult",
    "EscalatedSeverity",
    "FailureKind",
    "FatalCondition",
    "HandlerChain",
    "LogMessage",
    "Severity",
    "SinkWriteFailure",
    "UnhandledMessage",
    "UnknownCondition",
    "default_chain",
    "dispatch",
    "dispatch_all",
]
