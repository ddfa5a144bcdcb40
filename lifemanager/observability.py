"""
Structured Logging

Store mutations and session transitions are logged as structured
events (record_created, user_logged_in, ...) through structlog, on top
of the standard library logging machinery.

configure_logging() is called once by the application at start-up.
Modules call structlog.get_logger() at import time; the loggers are
lazy proxies, so configuration applied later still takes effect.
"""

import logging
import sys
from typing import Optional

import structlog

from lifemanager.config import AppSettings, get_settings


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog and the root stdlib logger.

    JSON output when settings.log_json is true, console output otherwise.
    """
    settings = settings or get_settings().app
    level = getattr(logging, settings.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
