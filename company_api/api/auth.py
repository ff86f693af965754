"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from company_api.api.dependencies import get_authority, get_user_service
from company_api.api.responses import respond
from company_api.schemas.auth import SignInRequest, SignUpRequest
from company_api.services.auth import Authority, TokenIdentity
from company_api.services.errors import AlreadyExistsError
from company_api.services.user import UserService

router = APIRouter(tags=["auth"])


@router.post("/sign-up")
def sign_up(
    credentials: SignUpRequest,
    users: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Register a new user."""
    try:
        users.create(credentials.username, credentials.password)
    except AlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="already registered"
        ) from e

    return respond(status.HTTP_200_OK, "sign up completed")


@router.post("/sign-in")
def sign_in(
    credentials: SignInRequest,
    users: Annotated[UserService, Depends(get_user_service)],
    authority: Annotated[Authority, Depends(get_authority)],
) -> JSONResponse:
    """Exchange a username and password for a signed access token."""
    user = users.authenticate(credentials.username, credentials.password)
    token = authority.issue_token(TokenIdentity(user_id=user.id, username=user.username))
    return respond(status.HTTP_200_OK, token)
