"""``python -m url_value`` behaves exactly like the ``url-value`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
