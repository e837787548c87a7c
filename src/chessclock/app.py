"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys


def _configure_logging() -> None:
    level = os.environ.get("CHESSCLOCK_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the Chess Clock window."""
    from chessclock.ui.bootstrap import run_application

    _configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
