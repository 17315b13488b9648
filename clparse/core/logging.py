"""Structlog loggers for clparse modules.

Importing clparse never touches logging configuration. Module loggers are
lazy structlog proxies, so they render through whatever pipeline the host
application configured. Hosts without one can call ``configure_logging``.

Usage:
    from clparse.core.logging import get_module_logger

    logger = get_module_logger()
    logger.info("event_name", key="value")

    # in an application entry point
    from clparse.core.logging import configure_logging

    configure_logging(log_level="DEBUG")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from clparse.core.config import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
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
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Install the default structlog pipeline on the stdlib root logger.

    Meant for applications and command line tools built on clparse; the
    library itself never calls it.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        # nothing is emitted above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production
    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )
    return structlog.stdlib.get_logger()


def get_module_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a module name.

    Args:
        name: Module name; defaults to the calling module

    Returns:
        Lazy logger with context, e.g. for clparse/commands/parser.py:
        {"component": "parser", "module_path": "clparse.commands.parser"}
    """
    if name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        module = inspect.getmodule(caller) if caller is not None else None
        name = module.__name__ if module is not None else None

    if name is None:
        return structlog.stdlib.get_logger(component="unknown")
    return structlog.stdlib.get_logger(
        name,
        component=name.rsplit(".", 1)[-1],
        module_path=name,
    )
