"""Module entrypoint for running speechsplit as ``python -m speechsplit``."""

from __future__ import annotations

from speechsplit.cli import main


if __name__ == "__main__":
    main()
