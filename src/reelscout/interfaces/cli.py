"""``reelscout`` console entrypoint: load config, set up logging, serve."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from reelscout.domain.exceptions import ConfigurationError
from reelscout.infrastructure.config import load_config
from reelscout.infrastructure.logging.setup import configure_logging
from reelscout.interfaces.app import create_app

log = structlog.get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reelscout",
        description="Serve the ReelScout movie and series browser.",
    )

    server = parser.add_argument_group("server")
    server.add_argument("--host", help=f"Bind host (env HOST, default {DEFAULT_HOST}).")
    server.add_argument(
        "--port", type=int, help=f"Bind port (env PORT, default {DEFAULT_PORT})."
    )

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", type=Path, help="YAML config file.")
    config.add_argument(
        "--dotenv", type=Path, help=".env file with REELSCOUT_* variables."
    )
    config.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    config.add_argument("--log-format", choices=["json", "console"])
    config.add_argument(
        "--debounce-ms",
        type=int,
        help="Quiet period after the last keystroke before a live search runs.",
    )
    return parser


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Flags the user actually passed, in load_config's flat-key form."""
    candidates = {
        "log_level": args.log_level,
        "log_format": args.log_format,
        "debounce_ms": args.debounce_ms,
    }
    return {key: value for key, value in candidates.items() if value is not None}


def _bind_address(args: argparse.Namespace) -> tuple[str, int]:
    host = args.host or os.getenv("HOST") or DEFAULT_HOST
    port = args.port or int(os.getenv("PORT") or DEFAULT_PORT)
    return host, port


def start(argv: Sequence[str] | None = None) -> int:
    """Run the server until it exits.

    Config is loaded exactly once here and passed down. Returns
    ``EXIT_CONFIG_ERROR`` without serving when the TMDB token is missing.
    """
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))

    config = load_config(
        config_path=args.config,
        dotenv_path=args.dotenv,
        cli_overrides=_cli_overrides(args),
    )
    log_config = configure_logging(config)
    log.info(
        "config_loaded",
        app_name=config.app_name,
        config=config.to_sectioned_dict(),
    )

    try:
        app = create_app(config)
    except ConfigurationError as exc:
        log.error("configuration_error", error=str(exc))
        return EXIT_CONFIG_ERROR

    host, port = _bind_address(args)
    uvicorn.run(app, host=host, port=port, log_config=log_config)
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
