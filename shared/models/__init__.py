"""
Shared Models
=============

Pydantic response envelopes shared across Forge services.
"""

from shared.models.common import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
