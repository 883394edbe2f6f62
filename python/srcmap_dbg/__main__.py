"""Entry point for ``python -m srcmap_dbg``."""

from __future__ import annotations

from srcmap_dbg import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
