"""Handler that appends errors to a text file."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import SinkWriteFailure
from ..models import LogMessage, Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ErrorHandler:
    """Claims ``Error`` and appends ``Error: <text>`` to ``path``.

    The file is opened for append on every write. Writes from concurrent
    callers are serialized so lines never interleave.

    When ``strict`` is False a failed write is skipped with a warning
    instead of raising ``SinkWriteFailure``.
    """

    path: Path
    strict: bool = True
    name: str = "error"
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def claims(self, severity: Severity) -> bool:
        return severity is Severity.ERROR

    def act(self, message: LogMessage) -> None:
        line = f"Error: {message.text}\n"
        try:
            with self._lock, self.path.open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            if self.strict:
                raise SinkWriteFailure(message.text, path=str(self.path), reason=reason) from exc
            logger.warning("Skipping error log write to %s: %s", self.path, reason)
