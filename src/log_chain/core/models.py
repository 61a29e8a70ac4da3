"""Core data models for severity dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Closed classification attached to every log message."""

    WARNING = "Warning"
    ERROR = "Error"
    FATAL_ERROR = "FatalError"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, name: str) -> Severity:
        """Resolve a case-insensitive member name or value into a Severity."""
        key = name.strip().upper().replace("-", "_")
        if key == "FATAL":
            key = "FATAL_ERROR"
        for member in cls:
            if key in (member.name, member.value.upper()):
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown severity '{name}'. Valid values: {valid}.")


@dataclass(frozen=True, slots=True)
class LogMessage:
    """A severity paired with free text; never mutated after creation."""

    severity: Severity
    text: str

    @classmethod
    def from_line(cls, line: str) -> LogMessage:
        """Parse a ``"<Severity>: <text>"`` line; only the separator space is dropped."""
        head, sep, text = line.partition(":")
        if not sep:
            raise ValueError(f"Expected '<Severity>: <text>', got {line!r}")
        return cls(severity=Severity.parse(head), text=text.removeprefix(" "))
