"""Chain assembly and the forwarding walk.

The chain owns its handlers as an ordered tuple; a handler's successor is
simply the next position. Handlers never reference each other, so a built
chain cannot contain a cycle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .config import resolve_error_log
from .errors import ChainConfigurationError, UnhandledMessage
from .handlers import ErrorHandler, FatalErrorHandler, LogHandler, UnknownHandler, WarningHandler
from .models import LogMessage, Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Which handler claimed a message and after how many forwarding hops."""

    handler: str
    hops: int


class HandlerChain:
    """Immutable ordered sequence of handlers with the head at position 0."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[LogHandler]) -> None:
        self._handlers: tuple[LogHandler, ...] = tuple(handlers)
        _check_exclusive(self._handlers)

    @property
    def handlers(self) -> tuple[LogHandler, ...]:
        return self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def successor(self, position: int) -> int | None:
        """Position of the node after ``position``, or None at the tail."""
        nxt = position + 1
        return nxt if nxt < len(self._handlers) else None

    def handle(self, message: LogMessage) -> DispatchResult:
        """Walk the chain from the head until a handler claims ``message``.

        The claiming handler's terminal action runs and may itself raise
        (``FatalCondition``, ``UnknownCondition``, ``SinkWriteFailure``).
        Raises ``UnhandledMessage`` when the chain is exhausted.
        """
        position: int | None = 0 if self._handlers else None
        while position is not None:
            handler = self._handlers[position]
            if handler.claims(message.severity):
                logger.debug(
                    "%s claimed %s message after %d hop(s)",
                    handler.name,
                    message.severity.value,
                    position,
                )
                handler.act(message)
                return DispatchResult(handler=handler.name, hops=position)
            position = self.successor(position)
        raise UnhandledMessage(message.text)


def _check_exclusive(handlers: tuple[LogHandler, ...]) -> None:
    seen_ids: set[int] = set()
    for h in handlers:
        if id(h) in seen_ids:
            raise ChainConfigurationError(f"Handler {h.name!r} appears more than once in the chain")
        seen_ids.add(id(h))

    for severity in Severity:
        owners = [h.name for h in handlers if h.claims(severity)]
        if len(owners) > 1:
            raise ChainConfigurationError(
                f"Severity {severity.value} is claimed by more than one handler: "
                f"{', '.join(owners)}"
            )


class ChainBuilder:
    """Wire handlers into one linear sequence before any dispatch."""

    def __init__(self, head: LogHandler) -> None:
        self._nodes: list[LogHandler] = [head]

    def _index(self, handler: LogHandler) -> int:
        for i, node in enumerate(self._nodes):
            if node is handler:
                return i
        raise ChainConfigurationError(f"Handler {handler.name!r} is not part of this chain")

    def set_next(self, handler: LogHandler, successor: LogHandler) -> ChainBuilder:
        """Install or replace the successor of ``handler``.

        A new successor becomes the tail. Nodes between ``handler`` and a
        successor already further down the chain are dropped, as they would
        become unreachable. A successor that already precedes ``handler``
        would forward forever and is rejected.
        """
        i = self._index(handler)
        try:
            j = self._index(successor)
        except ChainConfigurationError:
            self._nodes[i + 1 :] = [successor]
            return self

        if j <= i:
            raise ChainConfigurationError(
                f"Linking {handler.name!r} -> {successor.name!r} would form a cycle"
            )
        del self._nodes[i + 1 : j]
        return self

    def then(self, handler: LogHandler) -> ChainBuilder:
        """Append ``handler`` after the current tail."""
        return self.set_next(self._nodes[-1], handler)

    def build(self) -> HandlerChain:
        return HandlerChain(self._nodes)


def default_chain(error_log: str | Path | None = None, *, strict_sink: bool = True) -> HandlerChain:
    """Fatal -> Error -> Warning -> Unknown, in descending severity."""
    return (
        ChainBuilder(FatalErrorHandler())
        .then(ErrorHandler(resolve_error_log(error_log), strict=strict_sink))
        .then(WarningHandler())
        .then(UnknownHandler())
        .build()
    )
