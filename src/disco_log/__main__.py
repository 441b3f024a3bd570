"""Module entrypoint.

Allows:
    python -m disco_log --color inline --threads 4
"""

from __future__ import annotations

from disco_log.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
