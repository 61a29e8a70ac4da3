"""Command line driver.

Reads ``Severity: text`` lines and dispatches each through the default
chain. Without input, replays a fixed set of demo messages.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from log_chain.core.chain import default_chain
from log_chain.core.config import resolve_error_log, resolve_log_level
from log_chain.core.dispatch import dispatch_all
from log_chain.core.models import LogMessage, Severity
from log_chain.report import build_report

LOGGER = logging.getLogger(__name__)

DEMO_MESSAGES = (
    LogMessage(Severity.WARNING, "This is a warning"),
    LogMessage(Severity.ERROR, "This is an error"),
    LogMessage(Severity.FATAL_ERROR, "This is a fatal error"),
    LogMessage(Severity.UNKNOWN, "This is an unknown message"),
)


def _configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_messages(source: str) -> list[LogMessage]:
    """Parse non-blank lines from a file path or ``-`` for stdin."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise ValueError(f"Cannot read input {path}: {e.strerror or e}") from e

    out: list[LogMessage] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        try:
            out.append(LogMessage.from_line(line))
        except ValueError as e:
            raise ValueError(f"line {line_no}: {e}") from e
    return out


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-chain",
        description="Route log messages through the Fatal -> Error -> Warning -> Unknown chain.",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File of 'Severity: text' lines, or '-' for stdin. Default: replay demo messages.",
    )
    p.add_argument(
        "--error-log",
        default=None,
        help="Append-only file for Error messages (default: $LOG_CHAIN_ERROR_LOG or errors.log)",
    )
    p.add_argument(
        "--best-effort-sink",
        action="store_true",
        help="Skip failed error log writes with a warning instead of reporting a failure",
    )
    p.add_argument("--json", dest="as_json", action="store_true", help="Print a JSON summary")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        _configure_logging()
        error_log = resolve_error_log(args.error_log)
        messages = list(DEMO_MESSAGES) if args.input is None else _read_messages(args.input)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    chain = default_chain(error_log, strict_sink=not args.best_effort_sink)
    LOGGER.debug("Dispatching %d message(s) through %d handlers", len(messages), len(chain))
    outcomes = dispatch_all(chain, messages)
    report = build_report(outcomes)

    if args.as_json:
        print(report.model_dump_json(indent=2))
    else:
        print(f"\nHandled {report.handled} of {report.total} messages ({report.failed} failed).")

    return 1 if report.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
