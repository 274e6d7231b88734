"""
Tests for JobPostingService
"""
from uuid import uuid4

import pytest

from application.services.job_postings import JobPostingDraft, JobPostingChanges
from core.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from domain.enums import UserRole
from domain.value_objects import CallerIdentity, JobPostingStatus
from infrastructure.services.job_posting_service import JobPostingService


@pytest.fixture
def service(job_repo):
    return JobPostingService(job_repo)


def _draft(**overrides):
    fields = dict(
        title="  Python Developer ",
        description="Build APIs with FastAPI.",
        location="Berlin",
        salary_min=60000,
        salary_max=80000,
    )
    fields.update(overrides)
    return JobPostingDraft(**fields)


class TestCreateJob:
    """Test employer job creation"""

    @pytest.mark.asyncio
    async def test_created_pending_for_callers_company(self, service, job_repo, employer):
        job = await service.create_job(employer, _draft())

        assert job.status == JobPostingStatus.PENDING
        assert job.company_id == employer.company_id
        assert job.title == "Python Developer"
        assert job.salary_range.min_salary == 60000
        job_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_applicant_cannot_post(self, service, applicant):
        with pytest.raises(AuthorizationException):
            await service.create_job(applicant, _draft())

    @pytest.mark.asyncio
    async def test_employer_without_company(self, service):
        caller = CallerIdentity(user_id=uuid4(), role=UserRole.EMPLOYER)

        with pytest.raises(ValidationException) as exc_info:
            await service.create_job(caller, _draft())

        assert exc_info.value.field == "company_id"
        assert exc_info.value.message == "Your account is not linked to a company"

    @pytest.mark.asyncio
    async def test_inverted_salary_range(self, service, employer):
        with pytest.raises(ValidationException):
            await service.create_job(employer, _draft(salary_min=90000, salary_max=50000))

    @pytest.mark.asyncio
    async def test_blank_title(self, service, employer):
        with pytest.raises(ValidationException):
            await service.create_job(employer, _draft(title="   "))


class TestPublicListing:
    """Test approved job listing"""

    @pytest.mark.asyncio
    async def test_page_offset(self, service, job_repo, make_job):
        job_repo.find_by_status.return_value = [make_job()]
        job_repo.count_by_status.return_value = 21

        jobs, total = await service.list_approved_jobs(page=3, limit=10, search=" react ")

        assert total == 21
        assert len(jobs) == 1
        kwargs = job_repo.find_by_status.call_args.kwargs
        assert kwargs["offset"] == 20
        assert kwargs["limit"] == 10
        assert kwargs["search"] == "react"
        assert job_repo.find_by_status.call_args.args[0] == JobPostingStatus.APPROVED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 500)])
    async def test_invalid_paging(self, service, page, limit):
        with pytest.raises(ValidationException):
            await service.list_approved_jobs(page=page, limit=limit)

    @pytest.mark.asyncio
    async def test_pending_job_hidden(self, service, job_repo, make_job):
        job_repo.get_by_id.return_value = make_job(status=JobPostingStatus.PENDING)

        with pytest.raises(ResourceNotFoundException):
            await service.get_approved_job(uuid4())


class TestModeration:
    """Test admin review and owner updates"""

    @pytest.mark.asyncio
    async def test_admin_approves(self, service, job_repo, make_job, admin):
        job = make_job(status=JobPostingStatus.PENDING)
        job_repo.get_by_id.return_value = job

        updated = await service.review_job(admin, job.id, JobPostingStatus.APPROVED)

        assert updated.status == JobPostingStatus.APPROVED
        assert updated.published_at is not None

    @pytest.mark.asyncio
    async def test_admin_rejects_with_reason(self, service, job_repo, make_job, admin):
        job = make_job(status=JobPostingStatus.PENDING)
        job_repo.get_by_id.return_value = job

        updated = await service.review_job(admin, job.id, JobPostingStatus.REJECTED, "Spam")

        assert updated.status == JobPostingStatus.REJECTED
        assert updated.rejection_reason == "Spam"
        assert updated.published_at is None

    @pytest.mark.asyncio
    async def test_review_requires_admin(self, service, employer):
        with pytest.raises(AuthorizationException):
            await service.review_job(employer, uuid4(), JobPostingStatus.APPROVED)

    @pytest.mark.asyncio
    async def test_review_outcome_must_be_decision(self, service, admin):
        with pytest.raises(ValidationException):
            await service.review_job(admin, uuid4(), JobPostingStatus.CLOSED)

    @pytest.mark.asyncio
    async def test_pending_queue_requires_admin(self, service, job_repo, employer, admin):
        with pytest.raises(AuthorizationException):
            await service.list_pending_jobs(employer)

        job_repo.find_by_status.return_value = []
        assert await service.list_pending_jobs(admin) == []

    @pytest.mark.asyncio
    async def test_owner_closes_posting(self, service, job_repo, make_job, employer):
        job = make_job()
        job_repo.get_by_id.return_value = job

        updated = await service.update_job(employer, job.id, JobPostingChanges(status=JobPostingStatus.CLOSED))

        assert updated.status == JobPostingStatus.CLOSED

    @pytest.mark.asyncio
    async def test_owner_cannot_self_approve(self, service, job_repo, make_job, employer):
        job = make_job(status=JobPostingStatus.PENDING)
        job_repo.get_by_id.return_value = job

        with pytest.raises(AuthorizationException):
            await service.update_job(employer, job.id, JobPostingChanges(status=JobPostingStatus.APPROVED))

    @pytest.mark.asyncio
    async def test_other_employer_cannot_edit(self, service, job_repo, make_job, other_employer):
        job_repo.get_by_id.return_value = make_job()

        with pytest.raises(AuthorizationException):
            await service.update_job(other_employer, uuid4(), JobPostingChanges(title="New"))

    @pytest.mark.asyncio
    async def test_closed_posting_locked_for_owner(self, service, job_repo, make_job, employer):
        job_repo.get_by_id.return_value = make_job(status=JobPostingStatus.CLOSED)

        with pytest.raises(AuthorizationException):
            await service.update_job(employer, uuid4(), JobPostingChanges(title="Reopen"))

    @pytest.mark.asyncio
    async def test_empty_changes_is_noop(self, service, job_repo, make_job, employer):
        job = make_job()
        job_repo.get_by_id.return_value = job

        assert await service.update_job(employer, job.id, JobPostingChanges()) == job
        job_repo.update.assert_not_awaited()
