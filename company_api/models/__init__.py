"""SQLAlchemy models."""

from company_api.models.company import Company
from company_api.models.enums import CompanyStatus
from company_api.models.user import User

__all__ = [
    "User",
    "Company",
    "CompanyStatus",
]
