"""
Shared fixtures: entity factories, callers and mocked repositories
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from domain.entities import JobPosting, Application, RecruitmentPartner
from domain.enums import UserRole
from domain.value_objects import ApplicationStatus, CallerIdentity, JobPostingStatus, PartnerStatus


BASE_TIME = datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def company_id():
    return uuid4()


@pytest.fixture
def make_job(company_id):
    def _make_job(**overrides):
        fields = dict(
            id=uuid4(),
            company_id=company_id,
            title="Senior Frontend Developer",
            description="Build UIs with React and TypeScript.",
            location="Remote",
            status=JobPostingStatus.APPROVED,
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )
        fields.update(overrides)
        return JobPosting(**fields)

    return _make_job


@pytest.fixture
def make_application():
    def _make_application(score=None, minutes=0, **overrides):
        fields = dict(
            id=uuid4(),
            job_id=uuid4(),
            applicant_id=uuid4(),
            email="candidate@example.com",
            years_of_experience=2,
            skills=["React"],
            status=ApplicationStatus.PENDING,
            match_score=score,
            submitted_at=BASE_TIME + timedelta(minutes=minutes),
            updated_at=BASE_TIME + timedelta(minutes=minutes),
        )
        fields.update(overrides)
        return Application(**fields)

    return _make_application


@pytest.fixture
def applicant():
    return CallerIdentity(user_id=uuid4(), role=UserRole.APPLICANT)


@pytest.fixture
def employer(company_id):
    return CallerIdentity(user_id=uuid4(), role=UserRole.EMPLOYER, company_id=company_id)


@pytest.fixture
def other_employer():
    return CallerIdentity(user_id=uuid4(), role=UserRole.EMPLOYER, company_id=uuid4())


@pytest.fixture
def admin():
    return CallerIdentity(user_id=uuid4(), role=UserRole.ADMIN)


@pytest.fixture
def job_repo():
    repo = AsyncMock()
    repo.create.side_effect = lambda job: job
    repo.update.side_effect = lambda job: job
    return repo


@pytest.fixture
def application_repo():
    repo = AsyncMock()
    repo.exists_for_job.return_value = False
    repo.create.side_effect = lambda application: application
    repo.update.side_effect = lambda application: application
    repo.delete.return_value = True
    return repo


@pytest.fixture
def make_partner():
    def _make_partner(**overrides):
        fields = dict(
            id=uuid4(),
            submitted_by=uuid4(),
            company_name="Talent Bridge",
            email="hello@talentbridge.example",
            phone="+1 555 0100",
            specialty="Software Engineering",
            description="Technical recruiting for startups.",
            status=PartnerStatus.PENDING,
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )
        fields.update(overrides)
        return RecruitmentPartner(**fields)

    return _make_partner


@pytest.fixture
def partner_repo():
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.create.side_effect = lambda partner: partner
    repo.update.side_effect = lambda partner: partner
    return repo
