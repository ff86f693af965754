"""Company schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from company_api.models.enums import CompanyStatus

COMPANY_FIELDS = ("name", "code", "country", "website", "phone")

# Signed 64-bit range of the integer columns
MIN_BIGINT = -(2**63)
MAX_BIGINT = 2**63 - 1

BigInt = Annotated[int, Field(ge=MIN_BIGINT, le=MAX_BIGINT)]


class CompanyCreate(BaseModel):
    """Create a new company. Every attribute is required and non-empty."""

    name: str | None = None
    code: str | None = None
    country: str | None = None
    website: str | None = None
    phone: str | None = None

    @model_validator(mode="after")
    def check_required_fields(self) -> "CompanyCreate":
        for field in COMPANY_FIELDS:
            if not getattr(self, field):
                raise PydanticCustomError(
                    "missing_field", "no {field} provided", {"field": field}
                )
        return self


class CompanyUpdate(BaseModel):
    """Partial update of a company.

    An attribute is changed only when it is present in the request with a
    non-empty value; absent keys, nulls and empty strings leave the stored
    value untouched.
    """

    id: BigInt
    name: str | None = None
    code: str | None = None
    country: str | None = None
    website: str | None = None
    phone: str | None = None

    @field_validator(*COMPANY_FIELDS)
    @classmethod
    def empty_means_unchanged(cls, value: str | None) -> str | None:
        return value or None

    def changes(self) -> dict[str, str]:
        """Return the attributes this update actually sets."""
        return {
            field: getattr(self, field)
            for field in COMPANY_FIELDS
            if field in self.model_fields_set and getattr(self, field) is not None
        }


class CompanyFilter(BaseModel):
    """Sparse exact-match filter over active companies."""

    id: BigInt | None = None
    name: str | None = None
    code: str | None = None
    country: str | None = None
    website: str | None = None
    phone: str | None = None
    limit: int = Field(..., gt=0, le=MAX_BIGINT)
    offset: int = Field(0, ge=0, le=MAX_BIGINT)

    def predicates(self) -> dict[str, int | str]:
        """Return the populated filter fields; zero and empty values are ignored."""
        return {
            field: getattr(self, field)
            for field in ("id", *COMPANY_FIELDS)
            if getattr(self, field)
        }


class CompanyResponse(BaseModel):
    """Company response."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    code: str
    country: str
    website: str
    phone: str
    status: CompanyStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None
