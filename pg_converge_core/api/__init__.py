"""
API module for pg-converge.
"""

from .models import HealthResponse, DiffResponse, DiffErrorResponse
from .api import app

__all__ = [
    "HealthResponse",
    "DiffResponse",
    "DiffErrorResponse",
    "app"
]
