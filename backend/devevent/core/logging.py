"""
Logging setup for the DevEvent API.

structlog renders every record, including those emitted through stdlib
loggers by uvicorn and SQLAlchemy, so request logs and library logs share
one format. LOG_FORMAT picks the renderer ("json" or "console"); when unset,
production renders JSON and every other environment renders for a terminal.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from devevent.core.config import Settings, get_settings

# Library loggers that are noisy at INFO
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")


def _service_context(settings: Settings) -> Processor:
    def add_service(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", settings.APP_NAME)
        event_dict.setdefault("environment", settings.ENVIRONMENT)
        return event_dict

    return add_service


def _render_chain(settings: Settings) -> list[Processor]:
    fmt = settings.LOG_FORMAT or ("json" if settings.ENVIRONMENT == "production" else "console")
    if fmt == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def _install_handler(formatter: logging.Formatter, level: int) -> None:
    root = logging.getLogger()
    # Lifespan may run more than once per process (tests, reloads)
    root.handlers = [
        h for h in root.handlers
        if not isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context(settings),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_render_chain(settings),
        ],
    )
    _install_handler(formatter, getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
