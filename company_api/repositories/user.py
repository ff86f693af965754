"""User persistence."""

from typing import Protocol

from sqlalchemy.orm import Session

from company_api.models.user import User


class UserStore(Protocol):
    """Storage contract for users."""

    def create(self, username: str, password_hash: str) -> User: ...

    def get_by_username(self, username: str) -> User: ...


class UserRepository:
    """SQLAlchemy-backed user store."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, username: str, password_hash: str) -> User:
        """Insert a user. The unique index on username rejects duplicates."""
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def get_by_username(self, username: str) -> User:
        """Raises ``NoResultFound`` when no user has this username."""
        return self.db.query(User).filter(User.username == username).one()
