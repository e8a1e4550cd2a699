"""Application environment types.

Defines the runtime environments the harness and its fixture routers can be
configured for. Used by Settings to determine environment-specific behavior.

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Fixture routers under test (request logging suppressed)
- CI: Continuous integration runs
- PRODUCTION: Served application
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
