from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from log_chain.core.chain import HandlerChain, default_chain


@pytest.fixture
def error_log(tmp_path: Path) -> Path:
    return tmp_path / "errors.log"


@pytest.fixture
def chain(error_log: Path) -> HandlerChain:
    return default_chain(error_log)


@pytest.fixture
def write_messages() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write
