"""
Job Posting Service Interface
Employer postings and admin moderation
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID

from domain.entities import JobPosting
from domain.enums import JobType, ExperienceLevel
from domain.value_objects import CallerIdentity, JobPostingStatus


@dataclass(frozen=True)
class JobPostingDraft:
    """Fields an employer supplies when posting a job"""

    title: str
    description: str
    location: str
    job_type: JobType = JobType.FULL_TIME
    experience_level: ExperienceLevel = ExperienceLevel.MID
    remote_ok: bool = False
    requirements: List[str] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: str = "USD"


@dataclass(frozen=True)
class JobPostingChanges:
    """Partial update; None means leave unchanged"""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    remote_ok: Optional[bool] = None
    status: Optional[JobPostingStatus] = None


class IJobPostingService(ABC):
    """Job posting service interface"""

    @abstractmethod
    async def create_job(self, caller: CallerIdentity, draft: JobPostingDraft) -> JobPosting:
        """Create a posting in pending status for the caller's company"""
        pass

    @abstractmethod
    async def list_approved_jobs(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        location: Optional[str] = None,
        remote_only: bool = False
    ) -> Tuple[List[JobPosting], int]:
        """
        Public job listing

        Returns:
            Tuple of (page of postings, total matching count)
        """
        pass

    @abstractmethod
    async def get_approved_job(self, job_id: UUID) -> JobPosting:
        """Public single posting; non-approved postings are not found"""
        pass

    @abstractmethod
    async def list_company_jobs(self, caller: CallerIdentity) -> List[JobPosting]:
        """The calling employer's postings, any status"""
        pass

    @abstractmethod
    async def list_pending_jobs(self, caller: CallerIdentity) -> List[JobPosting]:
        """Moderation queue, oldest first (admin only)"""
        pass

    @abstractmethod
    async def review_job(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        status: JobPostingStatus,
        rejection_reason: Optional[str] = None
    ) -> JobPosting:
        """Approve or reject a posting (admin only)"""
        pass

    @abstractmethod
    async def update_job(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        changes: JobPostingChanges
    ) -> JobPosting:
        """Edit a posting (owner or admin)"""
        pass
