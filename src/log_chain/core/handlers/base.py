"""Handler interface shared by every link of a chain."""

from __future__ import annotations

from typing import Protocol

from ..models import LogMessage, Severity


class LogHandler(Protocol):
    """A chain link: claims a severity and performs its terminal action.

    Forwarding is not a handler concern; ``HandlerChain`` moves unclaimed
    messages to the next position.
    """

    name: str

    def claims(self, severity: Severity) -> bool:
        """Return True when this handler owns messages of ``severity``."""
        ...

    def act(self, message: LogMessage) -> None:
        """Perform the terminal action for a claimed message."""
        ...
