"""
Health and status endpoints.
"""

from fastapi import APIRouter

from pg_converge_core import __version__
from pg_converge_core.api.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    """Get API health status"""
    return HealthResponse(status="healthy", version=__version__)
