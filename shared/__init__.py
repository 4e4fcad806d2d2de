"""
Forge Shared Library
====================

Common utilities, configuration and abstractions shared across Forge services.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - auth: JWT authentication and password hashing
    - database: MongoDB client
    - models: Shared Pydantic response models

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Forge Team"

from shared.config import settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
