"""Health check endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from pokido import __version__

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe; does not call the external services."""
    return HealthResponse(status="healthy", version=__version__)
