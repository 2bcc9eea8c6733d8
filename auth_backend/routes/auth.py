"""
Signup and login endpoints.

Domain errors raised by the service propagate to the ``AuthError`` handler
registered in ``main``, which turns them into ``{"error": ...}`` bodies.
"""
from fastapi import APIRouter, Depends

from ..auth import AuthService
from ..dependencies import get_auth_service
from ..schemas import ErrorResponse, Token, UserCreate, UserLogin

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=Token,
    responses={
        400: {"description": "User already exists or invalid body", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
)
def signup(payload: UserCreate, service: AuthService = Depends(get_auth_service)):
    token = service.register(payload.name, payload.email, payload.password)
    return Token(token=token)


@router.post(
    "/login",
    response_model=Token,
    responses={
        401: {"description": "Invalid password", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
)
def login(credentials: UserLogin, service: AuthService = Depends(get_auth_service)):
    token = service.authenticate(credentials.email, credentials.password)
    return Token(token=token)
