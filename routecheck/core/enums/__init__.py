"""Core enums package.

Usage:
    from routecheck.core.enums import Environment
"""

from routecheck.core.enums.environment import Environment

__all__ = ["Environment"]
