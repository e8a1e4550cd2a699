"""Domain protocols.

Usage:
    from routecheck.domain.protocols import LoggerProtocol
"""

from routecheck.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
