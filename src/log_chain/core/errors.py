"""Dispatch failures raised out of a handler chain."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Why a dispatch did not end in a plain terminal action."""

    ESCALATED = "escalated"  # severity is never merely logged
    UNHANDLED = "unhandled"  # chain exhausted without a claimant
    SINK_WRITE = "sink_write"


class DispatchError(Exception):
    """Base class for every failure that unwinds out of ``HandlerChain.handle``.

    Concrete subclasses set ``kind``.
    """

    kind: FailureKind
    prefix = "Dispatch failed"

    def __init__(self, text: str) -> None:
        super().__init__(f"{self.prefix}: {text}")
        self.text = text


class EscalatedSeverity(DispatchError):
    """A claimed severity whose terminal action is itself a failure signal."""

    kind = FailureKind.ESCALATED
    prefix = "Escalated log message"


class FatalCondition(EscalatedSeverity):
    prefix = "Fatal Error"


class UnknownCondition(EscalatedSeverity):
    prefix = "Unknown log message"


class UnhandledMessage(DispatchError):
    """No handler in the chain claimed the message."""

    kind = FailureKind.UNHANDLED
    prefix = "Unhandled log message"


class SinkWriteFailure(DispatchError):
    """The append-only error sink could not be written."""

    kind = FailureKind.SINK_WRITE
    prefix = "Error log write failed"

    def __init__(self, text: str, *, path: str, reason: str) -> None:
        super().__init__(text)
        self.path = path
        self.reason = reason
        self.args = (f"{self.prefix} ({path}: {reason}): {text}",)


class ChainConfigurationError(ValueError):
    """A chain was wired in a way that breaks exclusivity or forms a cycle."""
