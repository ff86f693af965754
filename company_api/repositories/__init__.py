"""Stores owning all SQL against the application tables."""

from company_api.repositories.company import CompanyRepository, CompanyStore
from company_api.repositories.user import UserRepository, UserStore

__all__ = [
    "CompanyRepository",
    "CompanyStore",
    "UserRepository",
    "UserStore",
]
