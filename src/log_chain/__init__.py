"""Severity-based dispatch of log messages through a chain of handlers."""

from __future__ import annotations

from log_chain.core import (
    ChainBuilder,
    ChainConfigurationError,
    DispatchError,
    DispatchOutcome,
    EscalatedSeverity,
    FailureKind,
    FatalCondition,
    HandlerChain,
    LogMessage,
    Severity,
    SinkWriteFailure,
    UnhandledMessage,
    UnknownCondition,
    default_chain,
    dispatch_all,
)
from log_chain.core.handlers import ErrorHandler, FatalErrorHandler, UnknownHandler, WarningHandler

__all__ = [
    "ChainBuilder",
    "ChainConfigurationError",
    "DispatchError",
    "DispatchOutcome",
    "ErrorHandler",
    "EscalatedSeverity",
    "FailureKind",
    "FatalCondition",
    "FatalErrorHandler",
    "HandlerChain",
    "LogMessage",
    "Severity",
    "SinkWriteFailure",
    "UnhandledMessage",
    "UnknownCondition",
    "UnknownHandler",
    "WarningHandler",
    "default_chain",
    "dispatch_all",
]
