"""User registration, sign-in and bearer tokens."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from ..config import Settings
from ..db.repositories import UserRepository
from ..errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class AccountService:
    """Registers users and issues/verifies their access tokens."""

    def __init__(self, settings: Settings, user_repo: UserRepository):
        self.settings = settings
        self.user_repo = user_repo

    def create_access_token(self, user_id: int) -> str:
        """Issue a signed token for a user."""
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=self.settings.token_expire_minutes
        )
        claims = {"sub": str(user_id), "exp": expire}
        return jwt.encode(
            claims,
            self.settings.require_jwt_secret(),
            algorithm=self.settings.jwt_algorithm,
        )

    def verify_token(self, token: str) -> int:
        """Validate a token and return the user id it was issued for."""
        secret = self.settings.require_jwt_secret()
        try:
            payload = jwt.decode(token, secret, algorithms=[self.settings.jwt_algorithm])
            return int(payload["sub"])
        except (JWTError, KeyError, ValueError) as e:
            raise AuthenticationError("Could not validate credentials") from e

    async def create_account(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        img: str | None = None,
    ) -> User:
        """Store a new user with a hashed password."""
        if not email or not password or not name:
            raise ValidationError(
                "Missing required fields: email, password, and name are required"
            )

        if await self.user_repo.get_by_email(email) is not None:
            raise ConflictError("Email is already in use.")

        password_hash = await asyncio.to_thread(get_password_hash, password)
        user = User(name=name, email=email, password_hash=password_hash, img=img)

        try:
            await self.user_repo.create(user)
        except PersistenceError as e:
            # Lost a race with another sign-up for the same address
            if e.constraint:
                raise ConflictError("Email is already in use.") from e
            raise

        logger.info("Registered user %s", user.id)
        created = await self.user_repo.get(user.id)
        return created or user

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        img: str | None = None,
    ) -> tuple[str, User]:
        """Create an account and sign it in.

        Returns:
            (token, user) for the new account
        """
        self.settings.require_jwt_secret()
        user = await self.create_account(name, email, password, img)
        return self.create_access_token(user.id), user

    async def login(self, email: str | None, password: str | None) -> tuple[str, User]:
        """Check credentials.

        Returns:
            (token, user) for the signed-in account
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found")

        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            raise AuthenticationError("Incorrect password", status_code=403)

        logger.info("User %s signed in", user.id)
        return self.create_access_token(user.id), user
