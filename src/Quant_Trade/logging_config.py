"""Logging setup shared by the ``quant-trade`` CLI and the web app.

Both entry points call :func:`configure_logging` once before doing any work.
Library modules only ever create ``logging.getLogger(__name__)`` loggers.

Environment:
    LOG_LEVEL            Root level when no explicit level is given.
    LOG_LEVEL_<PACKAGE>  Level for one subpackage, e.g. ``LOG_LEVEL_QUERY=DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_SUBPACKAGES: Final[tuple[str, ...]] = ("query", "services", "web", "data", "reporting")

# Third-party loggers that are too chatty at INFO.
_QUIET_LIBRARIES: Final[tuple[str, ...]] = ("httpx", "uvicorn.access")


def _parse_level(name: str | None) -> int | None:
    """Map a level name like ``"debug"`` to its number, or None if unknown."""
    if not name:
        return None
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else None


def configure_logging(
    *,
    level: str = "",
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Configure the root logger and the per-package overrides.

    Priority: verbose > quiet > level param > LOG_LEVEL env > INFO default.
    ``force=True`` replaces whatever handlers uvicorn installed first.
    """
    if verbose:
        effective = logging.DEBUG
    elif quiet:
        effective = logging.WARNING
    else:
        effective = (
            _parse_level(level) or _parse_level(os.environ.get("LOG_LEVEL")) or logging.INFO
        )

    logging.basicConfig(level=effective, format=LOG_FORMAT, force=True)

    for library in _QUIET_LIBRARIES:
        logging.getLogger(library).setLevel(logging.WARNING)

    for package in _SUBPACKAGES:
        override = _parse_level(os.environ.get(f"LOG_LEVEL_{package.upper()}"))
        if override is not None:
            logging.getLogger(f"Quant_Trade.{package}").setLevel(override)
