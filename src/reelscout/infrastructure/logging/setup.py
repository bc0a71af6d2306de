"""structlog configuration shared by application code, uvicorn and libraries.

Application code logs through ``structlog.get_logger(__name__)``. Records from
plain stdlib loggers (uvicorn, fastapi, httpx) pass through the same
``ProcessorFormatter`` so every line has one format.
"""

from __future__ import annotations

import logging.config
from typing import Any

import structlog

from reelscout.infrastructure.config.schema import AppConfig, LogFormat

log = structlog.get_logger(__name__)

# Libraries that are chatty at INFO
_QUIET_LOGGERS: dict[str, str] = {"httpx": "WARNING", "httpcore": "WARNING"}


def _drop_color_message(_: Any, __: Any, event_dict: dict[str, Any]) -> dict[str, Any]:
    # Uvicorn attaches "color_message", which duplicates the message.
    event_dict.pop("color_message", None)
    return event_dict


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        _drop_color_message,
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]


def _renderer(log_format: LogFormat | None) -> structlog.typing.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _logger(handler: str, level: str) -> dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def build_logging_config(config: AppConfig) -> dict[str, Any]:
    """Return a ``logging.config.dictConfig`` dict, also usable as uvicorn's ``log_config``.

    Errors and app logs go to stderr; uvicorn's access log goes to stdout.
    """
    level = config.log_level

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": _shared_processors(),
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    _renderer(config.log_format),
                ],
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "structlog",
                "stream": "ext://sys.stderr",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "structlog",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": _logger("default", level),
            "uvicorn.error": {"level": level},
            "uvicorn.access": _logger("access", level),
            "fastapi": _logger("default", level),
            **{name: _logger("default", lvl) for name, lvl in _QUIET_LOGGERS.items()},
        },
        "root": {"handlers": ["default"], "level": level},
    }


def configure_logging(config: AppConfig) -> dict[str, Any]:
    """Configure structlog and stdlib logging.

    Returns the dict config so the CLI can hand it to ``uvicorn.run``, which
    would otherwise install its own formatters.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.format_exc_info,
            # hand the event dict to stdlib; ProcessorFormatter renders it
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    cfg = build_logging_config(config)
    logging.config.dictConfig(cfg)
    log.info("logging_configured", log_format=config.log_format, log_level=config.log_level)
    return cfg
