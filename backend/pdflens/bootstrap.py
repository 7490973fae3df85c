from __future__ import annotations

import logging
import os
import sys

_BOOTSTRAPPED = False

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def bootstrap_env(log_level: str = "INFO") -> None:
    """Idempotently enforce UTF-8 IO and configure process-wide logging."""
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    os.environ.setdefault("PYTHONIOENCODING", "utf-8")
    os.environ.setdefault("PYTHONUTF8", "1")
    os.environ.setdefault("PYTHONUNBUFFERED", "1")

    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            try:
                reconfigure(encoding="utf-8", errors="replace")
            except (ValueError, OSError):
                # Streams swapped out by test runners may refuse reconfiguration
                pass

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))

    _BOOTSTRAPPED = True
