"""Handler that escalates fatal errors."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import FatalCondition
from ..models import LogMessage, Severity


@dataclass(frozen=True, slots=True)
class FatalErrorHandler:
    """Claims ``FatalError``; its terminal action always raises."""

    name: str = "fatal"

    def claims(self, severity: Severity) -> bool:
        return severity is Severity.FATAL_ERROR

    def act(self, message: LogMessage) -> None:
        raise FatalCondition(message.text)
