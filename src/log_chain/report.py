"""JSON-serializable dispatch summary."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from log_chain.core.dispatch import DispatchOutcome
from log_chain.core.errors import FailureKind


class OutcomeRecord(BaseModel):
    severity: str = Field(description="Severity of the submitted message.")
    text: str = Field(description="Message text as submitted.")
    handler: str | None = Field(default=None, description="Handler that claimed the message.")
    hops: int | None = Field(default=None, ge=0, description="Forwarding hops before the claim.")
    failure: FailureKind | None = Field(
        default=None, description="Failure kind, or null when the terminal action succeeded."
    )
    detail: str | None = Field(default=None, description="Failure description.")


class DispatchReport(BaseModel):
    total: int = Field(ge=0)
    handled: int = Field(ge=0, description="Messages whose terminal action succeeded.")
    failed: int = Field(ge=0)
    outcomes: list[OutcomeRecord] = Field(default_factory=list)


def build_report(outcomes: Sequence[DispatchOutcome]) -> DispatchReport:
    """Summarize driver outcomes."""
    records = [
        OutcomeRecord(
            severity=o.message.severity.value,
            text=o.message.text,
            handler=o.handler,
            hops=o.hops,
            failure=o.failure,
            detail=o.detail,
        )
        for o in outcomes
    ]
    failed = sum(1 for o in outcomes if not o.ok)
    return DispatchReport(
        total=len(records),
        handled=len(records) - failed,
        failed=failed,
        outcomes=records,
    )
