"""structlog setup for the registry service.

Every event carries the service name, environment and version through
``structlog.contextvars``; the HTTP middleware adds the caller for the
lifetime of a request via :func:`caller_context`.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog.types import Processor

from product_registry import __version__
from product_registry.config import Settings, settings

SERVICE_NAME = "product-registry"

_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _renderer(use_json: bool) -> list[Processor]:
    if use_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def setup_logging(config: Settings | None = None) -> None:
    """Configure structlog and bind the service-wide context.

    JSON lines are emitted when ``log_json`` is on and the service is not
    running in ``dev``; otherwise events go to the console renderer.
    """
    config = config or settings
    level = logging.getLevelName(config.log_level.upper())
    use_json = config.log_json and config.environment != "dev"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        *_renderer(use_json),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=SERVICE_NAME,
        environment=config.environment,
        version=__version__,
    )


@contextmanager
def caller_context(caller: str) -> Iterator[None]:
    """Attach ``caller`` to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(caller=caller or None):
        yield


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    logger = structlog.get_logger(name)
    return logger.bind(**initial_context) if initial_context else logger
