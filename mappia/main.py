"""Entry point for the mappia Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from mappia.config import DEBUG_LOG_PATH, LOG_LEVEL
from mappia.ordering_app import OrderingApp


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``DEBUG`` to its number, INFO for anything unknown."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging() -> None:
    log_file = Path(DEBUG_LOG_PATH)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=resolve_log_level(LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    configure_logging()
    OrderingApp().run()


if __name__ == "__main__":
    main()
