"""
Business logic for user accounts.

Sign-up stores a salted PBKDF2 hash of the password; sign-in verifies
it and issues an access token whose subject is the username.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from task_tracker_api.app.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from task_tracker_api.app.core.security import create_access_token, hash_password, verify_password
from task_tracker_api.app.repositories.user_repository import UserRepository
from task_tracker_api.app.schemas.user import AccessToken, AuthCredentials, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Registration and authentication of users."""

    def __init__(self, repository: Optional[UserRepository] = None) -> None:
        self.repository = repository or UserRepository()

    async def sign_up(self, credentials: AuthCredentials) -> UserRead:
        """Register a new user.

        Raises ``ConflictError`` if the username is already taken.
        """
        try:
            user = await self.repository.create_user(
                credentials.username, hash_password(credentials.password)
            )
        except sqlite3.IntegrityError:
            raise ConflictError("Username already exists") from None
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    async def validate_user_password(self, credentials: AuthCredentials) -> Optional[UserRead]:
        """Return the user if the password matches, otherwise ``None``."""
        row = await self.repository.get_credentials(credentials.username)
        if row is None or not verify_password(credentials.password, row["password"]):
            return None
        return UserRead(id=row["id"], username=row["username"])

    async def sign_in(self, credentials: AuthCredentials) -> AccessToken:
        """Issue an access token for valid credentials.

        Raises ``AuthenticationError`` otherwise; the message does not
        reveal whether the username exists.
        """
        user = await self.validate_user_password(credentials)
        if user is None:
            logger.info("Failed sign-in attempt for %s", credentials.username)
            raise AuthenticationError("Invalid credentials")
        token = create_access_token({"sub": user.username})
        logger.debug("Generated access token for %s", user.username)
        return AccessToken(access_token=token)

    async def reset_password(self, username: str, new_password: str) -> None:
        """Replace the password of ``username``.

        Raises ``NotFoundError`` if no such user exists.
        """
        updated = await self.repository.set_password(username, hash_password(new_password))
        if updated == 0:
            raise NotFoundError(f'User "{username}" not found')
        logger.info("Password reset for %s", username)
