"""Logging adapters.

Usage:
    from routecheck.infrastructure.logging import ConsoleAdapter
"""

from routecheck.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
