"""Structlog configuration and logger setup.

Configures structlog for the translation façade: console rendering in
development, JSON in production, and silence under pytest.

Usage:
    from infrastructure.observability import get_module_logger

    logger = get_module_logger()
    logger.debug("textdomain_resolved", textdomain="site")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


# Levels above CRITICAL drop every record.
_SILENT = logging.CRITICAL + 1


def _build_processors(is_production: bool) -> list:
    """Processor chain ending in the JSON (production) or console renderer."""
    renderer = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Under pytest, loggers stay usable but nothing is emitted.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console output).

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        processors = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = _SILENT
    else:
        if is_production is None:
            is_production = settings.is_production
        processors = _build_processors(is_production)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=level == _SILENT)

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last dotted part) and ``module_path`` of the
    calling module.

    Example:
        # In infrastructure/i18n/service.py
        logger = get_module_logger()
        # context: {"component": "service", "module_path": "infrastructure.i18n.service"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        return logger.bind(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return logger.bind(component="unknown")
