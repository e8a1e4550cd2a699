"""Dependency container (composition root).

Application-scoped singletons for infrastructure services. Adapter selection
happens here so the rest of the harness depends only on protocols.

Usage:
    from routecheck.core.container import get_logger

    logger = get_logger()
    logger.info("route_case_started", path="/users")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from routecheck.core.config import settings

if TYPE_CHECKING:
    from routecheck.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from routecheck.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
