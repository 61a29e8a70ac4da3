"""Top-level dispatch driver.

Submits independent messages at the head of a chain. A failure of one
message is reported on the diagnostic channel and never stops the rest.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .chain import HandlerChain
from .errors import DispatchError, FailureKind
from .models import LogMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Result of submitting one message."""

    message: LogMessage
    handler: str | None = None
    hops: int | None = None
    failure: FailureKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def dispatch(
    chain: HandlerChain,
    message: LogMessage,
    *,
    diagnostics: TextIO | None = None,
) -> DispatchOutcome:
    """Dispatch one message, catching and reporting any ``DispatchError``."""
    try:
        result = chain.handle(message)
    except DispatchError as exc:
        print(str(exc), file=diagnostics or sys.stderr)
        logger.info(
            "Dispatch of %s message failed (%s): %s", message.severity.value, exc.kind.value, exc
        )
        handler = hops = None
        if exc.kind is not FailureKind.UNHANDLED:
            for i, h in enumerate(chain.handlers):
                if h.claims(message.severity):
                    handler, hops = h.name, i
                    break
        return DispatchOutcome(
            message=message, handler=handler, hops=hops, failure=exc.kind, detail=str(exc)
        )
    return DispatchOutcome(message=message, handler=result.handler, hops=result.hops)


def dispatch_all(
    chain: HandlerChain,
    messages: Iterable[LogMessage],
    *,
    diagnostics: TextIO | None = None,
) -> list[DispatchOutcome]:
    """Dispatch every message in order; one outcome per message."""
    return [dispatch(chain, m, diagnostics=diagnostics) for m in messages]
