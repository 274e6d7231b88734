"""
Tests for the SQLAlchemy repositories against a mocked AsyncSession
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from core.exceptions import (
    DuplicateResourceException,
    RepositoryException,
    ResourceNotFoundException,
)
from domain.value_objects import JobPostingStatus, PartnerStatus
from infrastructure.persistence.repositories.application import SQLAlchemyApplicationRepository
from infrastructure.persistence.repositories.job_posting import SQLAlchemyJobPostingRepository
from infrastructure.persistence.repositories.recruitment_partner import (
    SQLAlchemyRecruitmentPartnerRepository,
)
from infrastructure.persistence.repositories.sql_helpers import like_pattern


class _DriverError(Exception):
    """Stands in for asyncpg's UniqueViolationError"""

    def __init__(self, constraint_name):
        super().__init__("duplicate key value")
        self.constraint_name = constraint_name


def _integrity_error(message, cause=None):
    orig = Exception(message)
    orig.__cause__ = cause
    return IntegrityError("INSERT INTO ...", {}, orig)


def _result(model=None, rowcount=1):
    result = MagicMock()
    result.scalar_one_or_none.return_value = model
    result.rowcount = rowcount
    return result


@pytest.fixture
def session():
    session = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    return session


def _compile(clause):
    return clause.compile(dialect=postgresql.dialect())


class TestApplicationRepositoryCreate:
    """IntegrityError mapping on insert"""

    @pytest.mark.asyncio
    async def test_created(self, session, make_application):
        application = make_application(score=80)

        created = await SQLAlchemyApplicationRepository(session).create(application)

        assert created.id == application.id
        assert created.job_id == application.job_id
        assert created.match_score == 80
        session.add.assert_called_once()
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unique_violation_by_message(self, session, make_application):
        session.flush.side_effect = _integrity_error(
            'duplicate key value violates unique constraint "uq_applications_job_id_applicant_id"'
        )

        with pytest.raises(DuplicateResourceException):
            await SQLAlchemyApplicationRepository(session).create(make_application())

    @pytest.mark.asyncio
    async def test_unique_violation_by_constraint_name(self, session, make_application):
        session.flush.side_effect = _integrity_error(
            "<class 'asyncpg.exceptions.UniqueViolationError'>",
            cause=_DriverError("uq_applications_job_id_applicant_id"),
        )

        with pytest.raises(DuplicateResourceException):
            await SQLAlchemyApplicationRepository(session).create(make_application())

    @pytest.mark.asyncio
    async def test_other_constraint_is_repository_error(self, session, make_application):
        session.flush.side_effect = _integrity_error(
            'new row violates check constraint "ck_applications_experience"'
        )

        with pytest.raises(RepositoryException):
            await SQLAlchemyApplicationRepository(session).create(make_application())

    @pytest.mark.asyncio
    async def test_operational_error(self, session, make_application):
        session.flush.side_effect = OperationalError("INSERT INTO ...", {}, Exception("connection lost"))

        with pytest.raises(RepositoryException):
            await SQLAlchemyApplicationRepository(session).create(make_application())


class TestApplicationRepositoryWrites:
    """Update and delete"""

    @pytest.mark.asyncio
    async def test_update_missing_row(self, session, make_application):
        session.execute.return_value = _result(model=None)

        with pytest.raises(ResourceNotFoundException):
            await SQLAlchemyApplicationRepository(session).update(make_application())

        session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_row(self, session):
        session.execute.return_value = _result(rowcount=0)

        assert await SQLAlchemyApplicationRepository(session).delete(uuid4()) is False


class TestSearchConditions:
    """LIKE wildcards in user input are matched literally"""

    def test_like_pattern(self):
        assert like_pattern("100%_match") == "%100\\%\\_match%"
        assert like_pattern("C:\\dev") == "%C:\\\\dev%"
        assert like_pattern("react") == "%react%"

    def test_job_search_escapes_wildcards(self):
        clause = SQLAlchemyJobPostingRepository._conditions(
            JobPostingStatus.APPROVED, "100%_match", "new_york", False
        )
        compiled = _compile(clause)
        params = list(compiled.params.values())

        assert params.count("%100\\%\\_match%") == 2
        assert "%new\\_york%" in params
        assert str(compiled).count("ESCAPE") == 3

    def test_job_conditions_without_filters(self):
        compiled = _compile(SQLAlchemyJobPostingRepository._conditions(
            JobPostingStatus.APPROVED, None, None, True
        ))

        assert "ILIKE" not in str(compiled).upper()
        assert "remote_ok IS true" in str(compiled)

    def test_partner_search_escapes_wildcards(self):
        compiled = _compile(SQLAlchemyRecruitmentPartnerRepository._conditions(
            PartnerStatus.APPROVED, "50%", "it_"
        ))
        params = list(compiled.params.values())

        assert params.count("%50\\%%") == 3
        assert "%it\\_%" in params
        assert str(compiled).count("ESCAPE") == 4


class TestRecruitmentPartnerRepositoryCreate:
    """Email uniqueness on insert"""

    @pytest.mark.asyncio
    async def test_created(self, session, make_partner):
        partner = make_partner()

        created = await SQLAlchemyRecruitmentPartnerRepository(session).create(partner)

        assert created.id == partner.id
        assert created.status == PartnerStatus.PENDING

    @pytest.mark.asyncio
    async def test_email_violation_is_duplicate(self, session, make_partner):
        session.flush.side_effect = _integrity_error(
            "<class 'asyncpg.exceptions.UniqueViolationError'>",
            cause=_DriverError("uq_recruitment_partners_email"),
        )

        with pytest.raises(DuplicateResourceException):
            await SQLAlchemyRecruitmentPartnerRepository(session).create(make_partner())

    @pytest.mark.asyncio
    async def test_other_constraint_is_repository_error(self, session, make_partner):
        session.flush.side_effect = _integrity_error(
            'new row violates check constraint "ck_recruitment_partners_years"'
        )

        with pytest.raises(RepositoryException):
            await SQLAlchemyRecruitmentPartnerRepository(session).create(make_partner())
