"""Run the PDFLens backend under uvicorn.

Usage:
    pdflens --port 3000
    python -m pdflens --reload
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from .bootstrap import bootstrap_env
from .config import get_settings


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="PDFLens backend server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (env PORT)")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    settings = get_settings()
    bootstrap_env(settings.log_level)
    args = parse_args(argv)

    logger.info("Server is running on http://localhost:%d", args.port)
    logger.info("Health check: http://localhost:%d/health", args.port)
    uvicorn.run(
        "pdflens.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - manual script execution
    main()
