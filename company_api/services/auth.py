"""Authentication service for JWT and password handling."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from jose import JWTError, jwt
from passlib.context import CryptContext

from company_api.config import Settings


class TokenError(Exception):
    """Base class for token validation failures."""


class TokenMalformedError(TokenError):
    """The token could not be parsed or lacks required claims."""


class TokenSignatureError(TokenError):
    """The token signature does not verify with the signing key."""


class TokenExpiredError(TokenError):
    """The token is past its expiry instant."""


@dataclass(frozen=True)
class TokenIdentity:
    """Identity embedded in an access token."""

    user_id: int
    username: str


class Authority(Protocol):
    """Credential and token operations used by the API layer."""

    def hash_password(self, password: str) -> str: ...

    def verify_password(self, plain_password: str, hashed_password: str) -> bool: ...

    def issue_token(self, identity: TokenIdentity, now: datetime | None = None) -> str: ...

    def validate_token(self, token: str, now: datetime | None = None) -> TokenIdentity: ...


class TokenAuthority:
    """Hashes passwords and issues/validates signed, time-limited tokens."""

    def __init__(self, settings: Settings):
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(minutes=settings.jwt_expiration_minutes)
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.bcrypt_rounds,
        )

    def hash_password(self, password: str) -> str:
        """Hash a password."""
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        An unrecognised or corrupt hash counts as a mismatch.
        """
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    def issue_token(self, identity: TokenIdentity, now: datetime | None = None) -> str:
        """Create a JWT access token that expires one lifetime after ``now``."""
        issued_at = now or datetime.now(UTC)
        to_encode = {
            "sub": str(identity.user_id),
            "username": identity.username,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def validate_token(self, token: str, now: datetime | None = None) -> TokenIdentity:
        """Decode a token and return the identity it carries.

        Raises:
            TokenMalformedError: the token cannot be parsed or lacks claims
            TokenSignatureError: the signature does not match the key
            TokenExpiredError: ``now`` is past the token's expiry
        """
        try:
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise TokenMalformedError(str(e)) from e

        try:
            # Expiry is checked below against the caller's clock.
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise TokenSignatureError(str(e)) from e

        identity, expires_at = _parse_claims(claims)
        current = now or datetime.now(UTC)
        if current.timestamp() > expires_at:
            raise TokenExpiredError("Signature has expired.")
        return identity


def _parse_claims(claims: Mapping) -> tuple[TokenIdentity, float]:
    try:
        identity = TokenIdentity(user_id=int(claims["sub"]), username=str(claims["username"]))
        expires_at = float(claims["exp"])
    except (KeyError, TypeError, ValueError) as e:
        raise TokenMalformedError(f"Invalid token claims: {e}") from e
    return identity, expires_at
