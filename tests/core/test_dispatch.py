from __future__ import annotations

import io
from pathlib import Path

import pytest

from log_chain.core.chain import ChainBuilder, HandlerChain, default_chain
from log_chain.core.dispatch import dispatch, dispatch_all
from log_chain.core.errors import FailureKind
from log_chain.core.handlers import WarningHandler
from log_chain.core.models import LogMessage, Severity

DEMO = [
    LogMessage(Severity.WARNING, "This is a warning"),
    LogMessage(Severity.ERROR, "This is an error"),
    LogMessage(Severity.FATAL_ERROR, "This is a fatal error"),
    LogMessage(Severity.UNKNOWN, "This is an unknown message"),
]


def test_dispatch_all_reports_failures_and_continues(
    chain: HandlerChain, error_log: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    diagnostics = io.StringIO()

    outcomes = dispatch_all(chain, DEMO, diagnostics=diagnostics)

    escalated = FailureKind.ESCALATED
    assert [o.failure for o in outcomes] == [None, None, escalated, escalated]
    assert [o.handler for o in outcomes] == ["warning", "error", "fatal", "unknown"]
    assert [o.hops for o in outcomes] == [2, 1, 0, 3]
    assert diagnostics.getvalue().splitlines() == [
        "Fatal Error: This is a fatal error",
        "Unknown log message: This is an unknown message",
    ]
    assert capsys.readouterr().out == "Warning: This is a warning\n"
    assert error_log.read_text(encoding="utf-8") == "Error: This is an error\n"


def test_failure_does_not_stop_later_messages(
    chain: HandlerChain, capsys: pytest.CaptureFixture[str]
) -> None:
    outcomes = dispatch_all(
        chain,
        [
            LogMessage(Severity.FATAL_ERROR, "first"),
            LogMessage(Severity.UNKNOWN, "second"),
            LogMessage(Severity.WARNING, "third"),
        ],
    )

    captured = capsys.readouterr()
    assert [o.ok for o in outcomes] == [False, False, True]
    assert captured.out == "Warning: third\n"
    assert captured.err.splitlines() == ["Fatal Error: first", "Unknown log message: second"]


def test_unhandled_outcome_has_no_handler(capsys: pytest.CaptureFixture[str]) -> None:
    only_warnings = ChainBuilder(WarningHandler()).build()

    outcome = dispatch(only_warnings, LogMessage(Severity.ERROR, "x"))

    assert outcome.failure is FailureKind.UNHANDLED
    assert outcome.handler is None
    assert outcome.hops is None
    assert outcome.detail == "Unhandled log message: x"
    assert capsys.readouterr().err == "Unhandled log message: x\n"


def test_sink_failure_outcome(tmp_path: Path) -> None:
    diagnostics = io.StringIO()

    outcome = dispatch(
        default_chain(tmp_path), LogMessage(Severity.ERROR, "lost"), diagnostics=diagnostics
    )

    assert outcome.failure is FailureKind.SINK_WRITE
    assert outcome.handler == "error"
    assert outcome.hops == 1
    assert "lost" in diagnostics.getvalue()
