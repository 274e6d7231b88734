"""
JobPostingService Implementation
Employer job postings and admin approval workflow
"""
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from loguru import logger

from application.services.job_postings import (
    IJobPostingService,
    JobPostingDraft,
    JobPostingChanges,
)
from application.repositories.interfaces import IJobPostingRepository
from domain.entities import JobPosting
from domain.value_objects import CallerIdentity, JobPostingStatus, SalaryRange
from core.config import settings
from core.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)


_REVIEW_OUTCOMES = {JobPostingStatus.APPROVED, JobPostingStatus.REJECTED}


class JobPostingService(IJobPostingService):
    """Job posting service for employers and moderators"""

    def __init__(self, job_repository: IJobPostingRepository):
        self.job_repo = job_repository

    async def create_job(self, caller: CallerIdentity, draft: JobPostingDraft) -> JobPosting:
        if not caller.is_employer:
            raise AuthorizationException("Only employers can post jobs")
        if caller.company_id is None:
            raise ValidationException("company_id", "Your account is not linked to a company")

        salary_range = None
        if draft.salary_min is not None or draft.salary_max is not None:
            try:
                salary_range = SalaryRange(
                    min_salary=draft.salary_min,
                    max_salary=draft.salary_max,
                    currency=draft.salary_currency,
                )
            except ValueError as e:
                raise ValidationException("salary", str(e))

        now = datetime.now(timezone.utc)
        try:
            job = JobPosting(
                id=uuid4(),
                company_id=caller.company_id,
                title=draft.title.strip(),
                description=draft.description.strip(),
                location=draft.location.strip(),
                job_type=draft.job_type,
                experience_level=draft.experience_level,
                remote_ok=draft.remote_ok,
                requirements=list(draft.requirements),
                responsibilities=list(draft.responsibilities),
                benefits=list(draft.benefits),
                salary_range=salary_range,
                status=JobPostingStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
        except ValueError as e:
            raise ValidationException("job", str(e))

        created = await self.job_repo.create(job)
        logger.info(f"Job {created.id} created by {caller} and sent for approval")
        return created

    async def list_approved_jobs(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        location: Optional[str] = None,
        remote_only: bool = False
    ) -> Tuple[List[JobPosting], int]:
        if limit is None:
            limit = settings.JOBS_PAGE_SIZE
        if page < 1:
            raise ValidationException("page", "must be at least 1")
        if not 1 <= limit <= settings.JOBS_MAX_PAGE_SIZE:
            raise ValidationException("limit", f"must be between 1 and {settings.JOBS_MAX_PAGE_SIZE}")

        search = search.strip() if search else None
        location = location.strip() if location else None

        jobs = await self.job_repo.find_by_status(
            JobPostingStatus.APPROVED,
            search=search,
            location=location,
            remote_only=remote_only,
            newest_first=True,
            limit=limit,
            offset=(page - 1) * limit,
        )
        total = await self.job_repo.count_by_status(
            JobPostingStatus.APPROVED,
            search=search,
            location=location,
            remote_only=remote_only,
        )
        return jobs, total

    async def get_approved_job(self, job_id: UUID) -> JobPosting:
        job = await self.job_repo.get_by_id(job_id)
        if not job or not job.is_approved():
            raise ResourceNotFoundException("JobPosting", str(job_id))
        return job

    async def list_company_jobs(self, caller: CallerIdentity) -> List[JobPosting]:
        if not caller.is_employer or caller.company_id is None:
            raise AuthorizationException("Only employers with a company have postings")
        return await self.job_repo.find_by_company(caller.company_id)

    async def list_pending_jobs(self, caller: CallerIdentity) -> List[JobPosting]:
        if not caller.is_admin:
            raise AuthorizationException("Admin access required")
        return await self.job_repo.find_by_status(JobPostingStatus.PENDING, newest_first=False)

    async def review_job(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        status: JobPostingStatus,
        rejection_reason: Optional[str] = None
    ) -> JobPosting:
        if not caller.is_admin:
            raise AuthorizationException("Admin access required")
        if status not in _REVIEW_OUTCOMES:
            raise ValidationException("status", "must be 'approved' or 'rejected'")

        job = await self._get_job_or_raise(job_id)
        now = datetime.now(timezone.utc)
        approved = status == JobPostingStatus.APPROVED

        updated = await self.job_repo.update(replace(
            job,
            status=status,
            rejection_reason=None if approved else rejection_reason,
            published_at=now if approved else None,
            updated_at=now,
        ))
        logger.info(f"Job {job_id} {status.value} by {caller}")
        return updated

    async def update_job(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        changes: JobPostingChanges
    ) -> JobPosting:
        job = await self._get_job_or_raise(job_id)

        if not (caller.is_admin or caller.owns_company(job.company_id)):
            raise AuthorizationException("Not authorized to update this job")
        if job.is_closed() and not caller.is_admin:
            raise AuthorizationException("Closed postings can only be changed by an admin")

        fields = {
            name: value for name, value in (
                ("title", changes.title),
                ("description", changes.description),
                ("location", changes.location),
                ("remote_ok", changes.remote_ok),
                ("status", changes.status),
            ) if value is not None
        }
        if not fields:
            return job

        new_status = fields.get("status")
        if new_status is not None and new_status != job.status and not caller.is_admin:
            # Owners may only close their own postings; moderation is admin-only
            if new_status != JobPostingStatus.CLOSED:
                raise AuthorizationException("Only admins can approve or reject postings")

        try:
            updated_job = replace(job, updated_at=datetime.now(timezone.utc), **fields)
        except ValueError as e:
            raise ValidationException("job", str(e))

        updated = await self.job_repo.update(updated_job)
        logger.info(f"Job {job_id} updated by {caller}: {sorted(fields)}")
        return updated

    async def _get_job_or_raise(self, job_id: UUID) -> JobPosting:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise ResourceNotFoundException("JobPosting", str(job_id))
        return job
