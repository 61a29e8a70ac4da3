"""Catch-all handler for unclassified messages."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnknownCondition
from ..models import LogMessage, Severity


@dataclass(frozen=True, slots=True)
class UnknownHandler:
    """Claims ``Unknown``; such messages are never silently accepted."""

    name: str = "unknown"

    def claims(self, severity: Severity) -> bool:
        return severity is Severity.UNKNOWN

    def act(self, message: LogMessage) -> None:
        raise UnknownCondition(message.text)
