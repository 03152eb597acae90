"""Structlog setup for localekit.

localekit is a library: importing it never touches the global logging
configuration. Module loggers are lazy structlog proxies, so they follow
whatever the host application configures, whenever it does so.

Applications without their own setup can opt in to localekit's:

    from localekit.logging import configure_logging

    configure_logging(log_level="DEBUG")

Dependencies:
    - localekit.configuration.Settings (defaults for level and renderer)
"""

import inspect
import logging
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localekit.configuration import settings


def build_processors(is_production: bool) -> List[Processor]:
    """Return the processor chain used by configure_logging().

    Args:
        is_production: Render JSON lines instead of the console format.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger for an application.

    Call once at startup, and only when the application has no logging
    setup of its own.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...). Defaults to
            settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.

    Returns:
        A logger bound to the new configuration.
    """
    prod_mode = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Return a lazy logger carrying the calling module as context.

    Example:
        # In localekit/i18n/core.py
        logger = get_module_logger()
        # events carry component="core", module_path="localekit.i18n.core"
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
