"""Company persistence."""

from typing import Protocol

from sqlalchemy import func
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Query, Session

from company_api.models.company import Company
from company_api.models.enums import CompanyStatus
from company_api.schemas.company import CompanyCreate, CompanyFilter, CompanyUpdate


class CompanyStore(Protocol):
    """Storage contract for companies.

    Operations that match no row raise ``sqlalchemy.exc.NoResultFound``.
    """

    def create(self, data: CompanyCreate) -> Company: ...

    def get_by_id(self, company_id: int) -> Company: ...

    def list(self, filters: CompanyFilter) -> list[Company]: ...

    def update(self, changes: CompanyUpdate) -> Company: ...

    def delete_by_id(self, company_id: int) -> None: ...


class CompanyRepository:
    """SQLAlchemy-backed company store."""

    def __init__(self, db: Session):
        self.db = db

    def _active(self) -> Query:
        return self.db.query(Company).filter(Company.status == CompanyStatus.ACTIVE)

    def create(self, data: CompanyCreate) -> Company:
        company = Company(**data.model_dump(), status=CompanyStatus.ACTIVE)
        self.db.add(company)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(company)
        return company

    def get_by_id(self, company_id: int) -> Company:
        return self._active().filter(Company.id == company_id).one()

    def list(self, filters: CompanyFilter) -> list[Company]:
        query = self._active()
        for field, value in filters.predicates().items():
            query = query.filter(getattr(Company, field) == value)

        companies = query.limit(filters.limit).offset(filters.offset).all()
        if not companies:
            raise NoResultFound("No company matches the filter")
        return companies

    def update(self, changes: CompanyUpdate) -> Company:
        values = {getattr(Company, field): value for field, value in changes.changes().items()}
        values[Company.updated_at] = func.now()

        try:
            updated = (
                self._active()
                .filter(Company.id == changes.id)
                .update(values, synchronize_session=False)
            )
            if updated == 0:
                raise NoResultFound(f"No active company with id {changes.id}")
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        return self.get_by_id(changes.id)

    def delete_by_id(self, company_id: int) -> None:
        try:
            deleted = (
                self.db.query(Company)
                .filter(
                    Company.id == company_id,
                    Company.status.in_(CompanyStatus.sources_of(CompanyStatus.DELETED)),
                )
                .update(
                    {Company.status: CompanyStatus.DELETED, Company.updated_at: func.now()},
                    synchronize_session=False,
                )
            )
            if deleted == 0:
                raise NoResultFound(f"No deletable company with id {company_id}")
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
