"""
structlog setup for the AlphaSwap API.

Every record carries ``service`` and ``version`` from settings so lines from
several deployments can share one sink. Uvicorn and httpx loggers are routed
through the same formatter and held at WARNING.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import Settings, settings as default_settings

QUIET_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def service_info(service: str, version: str) -> structlog.types.Processor:
    """Processor that stamps the service identity onto each event."""

    def add_service_info(logger, method_name, event_dict):
        event_dict.setdefault("service", service)
        event_dict.setdefault("version", version)
        return event_dict

    return add_service_info


def resolve_level(config: Settings, log_level: Optional[str] = None) -> int:
    name = (log_level or config.log_level or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: Optional[Settings] = None, log_level: Optional[str] = None) -> None:
    """Configure structlog for ``config`` (the global settings by default).

    JSON lines unless the level is DEBUG, where the console renderer is
    easier to read during local chat sessions.
    """
    config = config or default_settings
    level = resolve_level(config, log_level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        service_info(config.service_name, config.service_version),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if level == logging.DEBUG:
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        shared_processors.append(structlog.processors.dict_tracebacks)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
