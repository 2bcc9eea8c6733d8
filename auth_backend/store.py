"""
Credential store: persistence of user records.
"""
from typing import Optional
import logging

from sqlalchemy import func, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import DuplicateUser, StoreError
from .models import User

logger = logging.getLogger(__name__)


class UserStore:
    """
    Insert and lookup of users over an explicitly owned session.

    Every SQLAlchemy failure is rolled back and re-raised as an ``AuthError``
    subclass, so callers only deal with the domain taxonomy.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            # Only a clash on the unique email index counts as a duplicate
            if self.get_by_email(email) is not None:
                raise DuplicateUser() from e
            logger.error("Integrity error inserting user: %s", e.orig)
            raise StoreError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to insert user")
            raise StoreError() from e
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to look up user by email")
            raise StoreError() from e

    def count(self) -> int:
        try:
            return self.db.query(func.count(User.id)).scalar()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError() from e

    def ping(self) -> None:
        """Run a trivial liveness query. Raises StoreError when the database is unreachable."""
        try:
            self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database connection check failed: %s", e)
            raise StoreError("Database connection issue") from e
