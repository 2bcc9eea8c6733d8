"""
Health check endpoint
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from ..dependencies import get_store
from ..errors import StoreError
from ..schemas import ErrorResponse, HealthResponse
from ..store import UserStore

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"description": "Database unreachable", "model": ErrorResponse}},
)
def health_check(store: UserStore = Depends(get_store)):
    """
    Health check that also verifies the database answers ``SELECT 1``.

    Returns:
        dict: Health status and timestamp, or a 500 error body
    """
    try:
        store.ping()
    except StoreError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=e.to_dict(),
        )

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
