"""Tests for user registration and lookup."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from company_api.config import Settings
from company_api.repositories.user import UserRepository
from company_api.services.auth import TokenAuthority
from company_api.services.errors import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from company_api.services.user import UserService, is_unique_violation


@pytest.fixture
def authority():
    return TokenAuthority(Settings(bcrypt_rounds=4))


@pytest.fixture
def users(db, authority):
    return UserService(UserRepository(db), authority)


def test_create_stores_hash_not_plaintext(users):
    user = users.create("alice", "password123")

    assert user.id is not None
    assert user.password_hash != "password123"
    assert user.created_at is not None


def test_duplicate_username_already_exists(users):
    users.create("alice", "password123")

    with pytest.raises(AlreadyExistsError):
        users.create("alice", "different-password")


def test_usernames_are_case_sensitive(users):
    users.create("alice", "password123")
    assert users.create("Alice", "password123").username == "Alice"


def test_other_integrity_errors_pass_through(authority):
    repository = MagicMock()
    repository.create.side_effect = IntegrityError(
        "INSERT", {}, Exception("NOT NULL constraint failed: users.username")
    )
    service = UserService(repository, authority)

    with pytest.raises(IntegrityError):
        service.create("alice", "password123")


def test_postgres_unique_violation_is_recognised():
    orig = Exception("duplicate key value violates unique constraint")
    orig.pgcode = "23505"
    assert is_unique_violation(IntegrityError("INSERT", {}, orig))


def test_get_by_username_not_found(users):
    with pytest.raises(NotFoundError):
        users.get_by_username("nobody")


def test_authenticate(users):
    users.create("alice", "password123")

    assert users.authenticate("alice", "password123").username == "alice"
    with pytest.raises(InvalidCredentialsError):
        users.authenticate("alice", "wrong-password")
    with pytest.raises(InvalidCredentialsError):
        users.authenticate("bob", "password123")
