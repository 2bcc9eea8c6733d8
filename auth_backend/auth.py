from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import jwt

from .config import settings
from .errors import InvalidCredentials, InvalidToken, StoreError, UserNotFound
from .store import UserStore

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or malformed hash
        return False


class TokenSigner:
    """
    Issue and decode HMAC-signed JWTs carrying a user id.

    With ``expire_minutes`` left as None the tokens have no ``exp`` claim
    and stay valid until the secret is rotated.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: Optional[int] = None):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user_id: int) -> str:
        payload = {"id": user_id}
        if self.expire_minutes is not None:
            payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as exc:
            raise InvalidToken() from exc


class AuthService:
    """Registration and login over an injected credential store."""

    def __init__(self, store: UserStore, signer: TokenSigner):
        self.store = store
        self.signer = signer

    def register(self, name: str, email: str, password: str) -> str:
        """
        Create a user and return a signed token for it.

        Raises:
            DuplicateUser: the email is already registered
            StoreError: any other persistence failure
        """
        password_hash = hash_password(password)
        user = self.store.create(name, email, password_hash)
        logger.info("User registered: user_id=%s", user.id)
        return self.signer.issue(user.id)

    def authenticate(self, email: str, password: str) -> str:
        """
        Verify credentials and return a signed token.

        Raises:
            UserNotFound: no user with this email, or the lookup itself failed
            InvalidCredentials: the password does not match the stored hash
        """
        try:
            user = self.store.get_by_email(email)
        except StoreError as e:
            raise UserNotFound() from e

        if user is None:
            logger.info("Login failed, unknown email")
            raise UserNotFound()

        if not verify_password(password, user.password_hash):
            logger.info("Login failed, invalid password: user_id=%s", user.id)
            raise InvalidCredentials()

        logger.info("Successful login: user_id=%s", user.id)
        return self.signer.issue(user.id)
