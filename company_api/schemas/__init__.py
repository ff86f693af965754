"""Pydantic schemas for API requests and responses."""

from company_api.schemas.auth import SignInRequest, SignUpRequest
from company_api.schemas.company import (
    CompanyCreate,
    CompanyFilter,
    CompanyResponse,
    CompanyUpdate,
)
from company_api.schemas.response import ApiResponse

__all__ = [
    "SignInRequest",
    "SignUpRequest",
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyFilter",
    "CompanyResponse",
    "ApiResponse",
]
