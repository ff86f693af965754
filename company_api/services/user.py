"""User registration and lookup rules."""

import logging

from sqlalchemy.exc import IntegrityError, NoResultFound

from company_api.models.user import User
from company_api.repositories.user import UserStore
from company_api.services.auth import Authority
from company_api.services.errors import AlreadyExistsError, InvalidCredentialsError, NotFoundError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Check whether the driver reported a unique-constraint violation."""
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    return str(error.orig).startswith("UNIQUE constraint failed")  # SQLite


class UserService:
    """Service for user accounts."""

    def __init__(self, repository: UserStore, authority: Authority):
        self.repository = repository
        self.authority = authority

    def create(self, username: str, password: str) -> User:
        """Register a user with a hashed password."""
        password_hash = self.authority.hash_password(password)
        try:
            user = self.repository.create(username, password_hash)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise AlreadyExistsError(f"Username {username!r} is taken") from e
            raise

        logger.info(f"Registered user {user.id}")
        return user

    def get_by_username(self, username: str) -> User:
        try:
            return self.repository.get_by_username(username)
        except NoResultFound as e:
            raise NotFoundError(f"User {username!r} not found") from e

    def authenticate(self, username: str, password: str) -> User:
        """Return the user when the password matches."""
        try:
            user = self.get_by_username(username)
        except NotFoundError as e:
            raise InvalidCredentialsError("incorrect username or password") from e

        if not self.authority.verify_password(password, user.password_hash):
            raise InvalidCredentialsError("incorrect username or password")
        return user
