"""Run the Dumbdown HTTP service: ``python -m server [--host H] [--port P] [--reload]``."""

from __future__ import annotations

import argparse
import os
from typing import Sequence

import uvicorn

from dumbdown.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

APP_PATH = "server.main:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m server", description="Serve the Dumbdown conversion API.")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"), help="Bind address (env HOST)")  # noqa: S104
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")), help="Bind port (env PORT)")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=os.getenv("RELOAD", "false").lower() == "true",
        help="Restart on code changes (env RELOAD=true)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()
    logger.info(
        "Serving %s on %s:%d",
        APP_PATH,
        args.host,
        args.port,
        extra={"reload": args.reload},
    )
    # Logging stays with the dumbdown handler; uvicorn must not reconfigure it.
    uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
