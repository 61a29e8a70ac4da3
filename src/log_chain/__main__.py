"""Module entrypoint.

Allows:
    python -m log_chain
"""

from __future__ import annotations

from log_chain.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
