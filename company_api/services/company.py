"""Company business rules and change notifications."""

import logging

from sqlalchemy.exc import NoResultFound

from company_api.models.company import Company
from company_api.repositories.company import CompanyStore
from company_api.schemas.company import CompanyCreate, CompanyFilter, CompanyResponse, CompanyUpdate
from company_api.services.errors import NotFoundError
from company_api.services.events import CompanyEventTopic, EventPublisher

logger = logging.getLogger(__name__)


def serialize_company(company: Company) -> str:
    """Serialize a company the same way the API returns it."""
    return CompanyResponse.model_validate(company).model_dump_json(by_alias=True)


class CompanyService:
    """Service for company lifecycle operations.

    Storage "no rows" signals become ``NotFoundError`` here; every other
    storage error propagates untouched. Successful updates and deletes are
    announced through the publisher after the store has committed.
    """

    def __init__(self, repository: CompanyStore, publisher: EventPublisher):
        self.repository = repository
        self.publisher = publisher

    def create(self, data: CompanyCreate) -> Company:
        company = self.repository.create(data)
        logger.info(f"Created company {company.id}")
        return company

    def get_by_id(self, company_id: int) -> Company:
        try:
            return self.repository.get_by_id(company_id)
        except NoResultFound as e:
            raise NotFoundError(f"Company {company_id} not found") from e

    def list(self, filters: CompanyFilter) -> list[Company]:
        try:
            return self.repository.list(filters)
        except NoResultFound as e:
            raise NotFoundError("No company matches the filter") from e

    def update(self, changes: CompanyUpdate) -> Company:
        try:
            company = self.repository.update(changes)
        except NoResultFound as e:
            raise NotFoundError(f"Company {changes.id} not found") from e

        self._notify(CompanyEventTopic.COMPANY_UPDATE, serialize_company(company))
        return company

    def delete_by_id(self, company_id: int) -> None:
        try:
            self.repository.delete_by_id(company_id)
        except NoResultFound as e:
            raise NotFoundError(f"Company {company_id} not found") from e

        logger.info(f"Deleted company {company_id}")
        self._notify(CompanyEventTopic.COMPANY_DELETE, str(company_id))

    def _notify(self, topic: str, message: str) -> None:
        # The mutation is already committed; a failed publish must not undo the response
        try:
            self.publisher.publish(topic, message)
        except Exception as e:
            logger.error(f"Failed to publish to {topic}: {e}")
