"""Tests for company persistence."""

import pytest
from sqlalchemy.exc import NoResultFound

from company_api.models.company import Company
from company_api.models.enums import CompanyStatus
from company_api.repositories.company import CompanyRepository
from company_api.schemas.company import CompanyCreate, CompanyFilter, CompanyUpdate


@pytest.fixture
def repository(db):
    return CompanyRepository(db)


@pytest.fixture
def company(repository, acme):
    return repository.create(CompanyCreate(**acme))


def test_create_assigns_id_and_active_status(repository, company):
    assert company.id is not None
    fetched = repository.get_by_id(company.id)
    assert fetched.status == CompanyStatus.ACTIVE
    assert fetched.name == "Acme"
    assert fetched.created_at is not None


def test_get_missing_raises_no_rows(repository):
    with pytest.raises(NoResultFound):
        repository.get_by_id(99999)


def test_list_filters_are_conjunctive(repository, acme):
    repository.create(CompanyCreate(**acme))
    repository.create(CompanyCreate(**{**acme, "name": "Globex", "code": "GX"}))
    repository.create(CompanyCreate(**{**acme, "name": "Acme", "country": "DE"}))

    results = repository.list(CompanyFilter(name="Acme", country="US", limit=10))
    assert [(c.name, c.country) for c in results] == [("Acme", "US")]

    assert len(repository.list(CompanyFilter(name="Acme", limit=10))) == 2
    assert len(repository.list(CompanyFilter(limit=10))) == 3


def test_list_by_id(repository, company, acme):
    repository.create(CompanyCreate(**{**acme, "name": "Globex"}))

    results = repository.list(CompanyFilter(id=company.id, limit=10))
    assert [c.id for c in results] == [company.id]


def test_list_applies_limit_and_offset(repository, acme):
    for index in range(5):
        repository.create(CompanyCreate(**{**acme, "code": f"C{index}"}))

    assert len(repository.list(CompanyFilter(limit=3))) == 3
    assert len(repository.list(CompanyFilter(limit=3, offset=3))) == 2
    with pytest.raises(NoResultFound):
        repository.list(CompanyFilter(limit=3, offset=5))


def test_list_filter_values_are_bound_not_interpolated(repository, company):
    with pytest.raises(NoResultFound):
        repository.list(CompanyFilter(name="Acme' OR '1'='1", limit=10))


def test_list_without_matches_raises_no_rows(repository, company):
    with pytest.raises(NoResultFound):
        repository.list(CompanyFilter(code="ZZZ", limit=10))


def test_update_changes_only_present_fields(repository, company):
    updated = repository.update(CompanyUpdate(id=company.id, code="AC2", website="", phone=None))

    assert updated.code == "AC2"
    assert updated.name == "Acme"
    assert updated.website == "acme.com"
    assert updated.phone == "555"

    fetched = repository.get_by_id(company.id)
    assert fetched.code == "AC2"
    assert fetched.country == "US"


def test_update_missing_raises_no_rows(repository):
    with pytest.raises(NoResultFound):
        repository.update(CompanyUpdate(id=99999, name="Ghost"))


def test_update_deleted_company_is_rejected(repository, company, db):
    repository.delete_by_id(company.id)

    with pytest.raises(NoResultFound):
        repository.update(CompanyUpdate(id=company.id, name="Zombie"))

    row = db.query(Company).filter(Company.id == company.id).one()
    assert row.name == "Acme"
    assert row.status == CompanyStatus.DELETED


def test_delete_is_soft(repository, company, db):
    repository.delete_by_id(company.id)

    row = db.query(Company).filter(Company.id == company.id).one()
    assert row.status == CompanyStatus.DELETED

    with pytest.raises(NoResultFound):
        repository.get_by_id(company.id)
    with pytest.raises(NoResultFound):
        repository.list(CompanyFilter(id=company.id, limit=1))


def test_second_delete_raises_no_rows(repository, company):
    repository.delete_by_id(company.id)

    with pytest.raises(NoResultFound):
        repository.delete_by_id(company.id)


def test_status_transitions():
    assert CompanyStatus.ACTIVE.can_transition_to(CompanyStatus.DELETED)
    assert not CompanyStatus.DELETED.can_transition_to(CompanyStatus.ACTIVE)
    assert not CompanyStatus.DELETED.can_transition_to(CompanyStatus.DELETED)
    assert CompanyStatus.sources_of(CompanyStatus.DELETED) == [CompanyStatus.ACTIVE]
    assert CompanyStatus.sources_of(CompanyStatus.ACTIVE) == []
