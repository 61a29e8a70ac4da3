from __future__ import annotations

from log_chain.core.dispatch import DispatchOutcome
from log_chain.core.errors import FailureKind
from log_chain.core.models import LogMessage, Severity
from log_chain.report import build_report


def test_build_report_counts_and_serializes() -> None:
    outcomes = [
        DispatchOutcome(message=LogMessage(Severity.WARNING, "w"), handler="warning", hops=2),
        DispatchOutcome(
            message=LogMessage(Severity.FATAL_ERROR, "f"),
            handler="fatal",
            hops=0,
            failure=FailureKind.ESCALATED,
            detail="Fatal Error: f",
        ),
    ]

    report = build_report(outcomes)

    assert (report.total, report.handled, report.failed) == (2, 1, 1)
    dumped = report.model_dump()
    assert dumped["outcomes"][0] == {
        "severity": "Warning",
        "text": "w",
        "handler": "warning",
        "hops": 2,
        "failure": None,
        "detail": None,
    }
    assert dumped["outcomes"][1]["failure"] == "escalated"
    assert report.outcomes[1].failure is FailureKind.ESCALATED
    assert report.model_dump(mode="json")["outcomes"][1]["failure"] == "escalated"


def test_build_report_empty() -> None:
    report = build_report([])
    assert report.model_dump() == {"total": 0, "handled": 0, "failed": 0, "outcomes": []}
