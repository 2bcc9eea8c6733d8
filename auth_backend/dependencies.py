"""Request-scoped wiring of the store, signer and service."""
from fastapi import Depends
from sqlalchemy.orm import Session

from .auth import AuthService, TokenSigner
from .config import settings
from .db import get_db
from .store import UserStore


def get_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_signer() -> TokenSigner:
    return TokenSigner(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )


def get_auth_service(
    store: UserStore = Depends(get_store),
    signer: TokenSigner = Depends(get_signer),
) -> AuthService:
    return AuthService(store, signer)
