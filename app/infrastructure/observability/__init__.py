"""Infrastructure observability module - structured logging.

Exports:
    get_module_logger: Get a logger bound to the calling module
    logger: Global logger instance
    configure_logging: Configure structured logging
"""

from infrastructure.observability.logging import (
    configure_logging,
    get_module_logger,
    logger,
)

__all__ = [
    "get_module_logger",
    "logger",
    "configure_logging",
]
