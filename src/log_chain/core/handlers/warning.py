"""Handler that prints warnings to the informational stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from ..models import LogMessage, Severity


@dataclass(frozen=True, slots=True)
class WarningHandler:
    """Claims ``Warning`` and prints ``Warning: <text>``.

    ``stream`` defaults to whatever ``sys.stdout`` is at call time.
    """

    stream: TextIO | None = None
    name: str = "warning"

    def claims(self, severity: Severity) -> bool:
        return severity is Severity.WARNING

    def act(self, message: LogMessage) -> None:
        print(f"Warning: {message.text}", file=self.stream or sys.stdout)
