"""FastAPI dependencies for authentication, storage and services."""

import logging
import re
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from company_api.database import get_db
from company_api.repositories.company import CompanyRepository
from company_api.repositories.user import UserRepository
from company_api.schemas.company import MAX_BIGINT, MIN_BIGINT
from company_api.services.auth import (
    Authority,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from company_api.services.company import CompanyService
from company_api.services.events import EventPublisher
from company_api.services.user import UserService

logger = logging.getLogger(__name__)

COMPANY_ID_PATTERN = re.compile(r"-?[0-9]+")


class AuthorizationGate:
    """Rejects requests that do not carry a valid token in the configured header.

    Accepted requests reach the handler unchanged; the decoded identity is
    not passed along.
    """

    def __init__(self, authority: Authority, header: str = "token"):
        self.authority = authority
        self.header = header

    async def __call__(self, request: Request) -> None:
        token = request.headers.get(self.header)
        if not token:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="missing token")

        try:
            self.authority.validate_token(token)
        except TokenMalformedError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except (TokenSignatureError, TokenExpiredError) as e:
            logger.info(f"Rejected token on {request.url.path}: {e}")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=None) from e


def get_authority(request: Request) -> Authority:
    """Get the token authority built at startup."""
    return request.app.state.authority


def get_publisher(request: Request) -> EventPublisher:
    """Get the change-notification publisher built at startup."""
    return request.app.state.publisher


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    authority: Annotated[Authority, Depends(get_authority)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(UserRepository(db), authority)


def get_company_service(
    db: Annotated[Session, Depends(get_db)],
    publisher: Annotated[EventPublisher, Depends(get_publisher)],
) -> CompanyService:
    """Get company service with dependencies."""
    return CompanyService(CompanyRepository(db), publisher)


def company_id_param(id: Annotated[str, Query()] = "") -> int:  # noqa: A002
    """Parse the ``id`` query parameter as a signed 64-bit decimal integer."""
    if not COMPANY_ID_PATTERN.fullmatch(id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="bad id")

    company_id = int(id)
    if not MIN_BIGINT <= company_id <= MAX_BIGINT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="bad id")
    return company_id
