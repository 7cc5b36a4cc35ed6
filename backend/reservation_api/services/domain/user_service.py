"""
User Service: registration and login.

Both endpoints are public; every other route is guarded by current_user.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from reservation_api.models import User
from reservation_api.repositories import UserRepository
from reservation_shared.config.logging import auth_logger as logger, mask_user_id, mask_username
from reservation_shared.config.settings import Settings
from reservation_shared.security.auth import get_signing_key, sign_jwt
from reservation_shared.security.password import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)
from reservation_shared.utils.exceptions import ConflictError, DatabaseError, UnauthorizedError
from reservation_shared.utils.schemas import UserCredentials

INVALID_CREDENTIALS = "Invalid username or password."
USER_CREATED = "User created successfully."
USER_EXISTS = "User already exists."


class UserService:
    def __init__(self, repo: UserRepository, settings: Settings):
        self._repo = repo
        self._settings = settings

    def register(self, credentials: UserCredentials) -> str:
        """
        Create a user with a bcrypt-hashed password.

        Raises:
            ConflictError: If the username is taken.
            DatabaseError: If the user could not be stored.
        """
        masked = mask_username(credentials.username)
        if self._repo.username_exists(credentials.username):
            raise ConflictError(USER_EXISTS, username=masked)

        user = User(
            username=credentials.username,
            password_hash=hash_password(credentials.password),
        )
        try:
            self._repo.add(user)
            self._repo.save_changes()
        except IntegrityError:
            # Lost a race with a concurrent registration
            raise ConflictError(USER_EXISTS, username=masked)
        except SQLAlchemyError as e:
            raise DatabaseError("create_user", username=masked, error=str(e))

        logger.info("User registered", username=masked, user_id=user.id)
        return USER_CREATED

    def login(self, credentials: UserCredentials) -> str:
        """
        Verify credentials and mint an access token.

        Unknown users and wrong passwords get the same 401, and both paths
        run one bcrypt comparison.

        Raises:
            ConfigurationMissingError: If the signing configuration is absent.
            UnauthorizedError: If the credentials do not match.
        """
        get_signing_key(self._settings)
        masked = mask_username(credentials.username)

        user = self._repo.get_by_username(credentials.username)
        if user is None:
            verify_password(credentials.password, DUMMY_PASSWORD_HASH)
            raise UnauthorizedError(INVALID_CREDENTIALS, username=masked, reason="unknown_user")

        if not verify_password(credentials.password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS, username=masked, reason="bad_password")

        token = sign_jwt(
            {"sub": str(user.id), "name": user.username, "user_id": user.id},
            self._settings,
        )
        logger.info("User logged in", username=masked, user_id=mask_user_id(user.id))
        return token
