"""Authentication domain service."""

import secrets
import string

import logfire
from sqlalchemy.exc import IntegrityError

from newsboard.domain.error import InvalidCredentialsError, UsernameTakenError
from newsboard.domain.model.user import User
from newsboard.domain.repository import UserRepository
from newsboard.domain.value import UserId

from .base import Service

USER_ID_LENGTH = 15
_USER_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_user_id() -> UserId:
    """Random opaque user id."""
    return UserId(
        "".join(secrets.choice(_USER_ID_ALPHABET) for _ in range(USER_ID_LENGTH))
    )


class PasswordHasher:
    """Password hashing interface implemented by adapters."""

    def hash(self, password: str) -> str:
        """Hash a plain-text password.

        Args:
            password: Plain-text password

        Returns:
            Encoded hash suitable for storage
        """
        raise NotImplementedError

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain-text password against a stored hash."""
        raise NotImplementedError


class AuthService(Service):
    """Domain service for username/password accounts."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            password_hasher: Password hashing adapter
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def signup(self, username: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Requested unique username
            password: Plain-text password

        Returns:
            Created user

        Raises:
            UsernameTakenError: If the username is already registered
        """
        with logfire.span("auth_service.signup", username=username):
            existing = await self.user_repository.find_by_username(username)
            if existing:
                logfire.warn("Signup with existing username", username=username)
                raise UsernameTakenError(username)

            user = User(
                id=generate_user_id(),
                username=username,
                password_hash=self.password_hasher.hash(password),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent signup
                logfire.warn("Duplicate username on insert", username=username)
                raise UsernameTakenError(username)

            logfire.info("User created", user_id=saved.id, username=username)
            return saved

    async def authenticate(self, username: str, password: str) -> User:
        """Check a username/password pair.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        with logfire.span("auth_service.authenticate", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.info("Login for unknown username", username=username)
                raise InvalidCredentialsError()

            if not self.password_hasher.verify(password, user.password_hash):
                logfire.info("Login with wrong password", user_id=user.id)
                raise InvalidCredentialsError()

            return user
