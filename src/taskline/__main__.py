"""Module entrypoint for `python -m taskline`."""

from __future__ import annotations

from .cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
