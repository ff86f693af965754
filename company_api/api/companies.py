"""Company API endpoints.

Every route here sits behind the authorization gate, attached when the
router is included in the application.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from company_api.api.dependencies import company_id_param, get_company_service
from company_api.api.responses import respond
from company_api.schemas.company import CompanyCreate, CompanyFilter, CompanyResponse, CompanyUpdate
from company_api.services.company import CompanyService

router = APIRouter(tags=["companies"])


def _dump(company) -> dict:
    return CompanyResponse.model_validate(company).model_dump(mode="json", by_alias=True)


@router.post("/company/create")
def create_company(
    company_data: CompanyCreate,
    companies: Annotated[CompanyService, Depends(get_company_service)],
) -> JSONResponse:
    """Create a company."""
    companies.create(company_data)
    return respond(status.HTTP_200_OK, "created")


@router.get("/company")
def get_company(
    company_id: Annotated[int, Depends(company_id_param)],
    companies: Annotated[CompanyService, Depends(get_company_service)],
) -> JSONResponse:
    """Get an active company by id."""
    company = companies.get_by_id(company_id)
    return respond(status.HTTP_200_OK, _dump(company))


@router.post("/companies")
def list_companies(
    filters: CompanyFilter,
    companies: Annotated[CompanyService, Depends(get_company_service)],
) -> JSONResponse:
    """List active companies matching every populated filter field."""
    results = companies.list(filters)
    return respond(status.HTTP_200_OK, [_dump(company) for company in results])


@router.patch("/company/update")
def update_company(
    changes: CompanyUpdate,
    companies: Annotated[CompanyService, Depends(get_company_service)],
) -> JSONResponse:
    """Partially update a company; omitted or empty fields keep their values."""
    companies.update(changes)
    return respond(status.HTTP_200_OK, "updated")


@router.delete("/company")
def delete_company(
    company_id: Annotated[int, Depends(company_id_param)],
    companies: Annotated[CompanyService, Depends(get_company_service)],
) -> JSONResponse:
    """Soft-delete a company."""
    companies.delete_by_id(company_id)
    return respond(status.HTTP_200_OK, "deleted")
