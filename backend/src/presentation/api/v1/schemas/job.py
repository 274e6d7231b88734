"""
Job Schemas
Pydantic schemas for job posting and moderation API
"""
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field, model_validator

from domain.entities import JobPosting
from domain.enums import JobType, ExperienceLevel
from domain.value_objects import JobPostingStatus
from application.services.job_postings import JobPostingDraft, JobPostingChanges


class JobCreateRequest(BaseModel):
    """Request schema for posting a job"""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    job_type: JobType = JobType.FULL_TIME
    experience_level: ExperienceLevel = ExperienceLevel.MID
    remote_ok: bool = False
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: str = Field("USD", min_length=3, max_length=10)

    @model_validator(mode="after")
    def check_salary_range(self) -> "JobCreateRequest":
        if self.salary_min is not None and self.salary_max is not None and self.salary_max < self.salary_min:
            raise ValueError("salary_max cannot be less than salary_min")
        return self

    def to_draft(self) -> JobPostingDraft:
        return JobPostingDraft(
            title=self.title,
            description=self.description,
            location=self.location,
            job_type=self.job_type,
            experience_level=self.experience_level,
            remote_ok=self.remote_ok,
            requirements=self.requirements,
            responsibilities=self.responsibilities,
            benefits=self.benefits,
            salary_min=self.salary_min,
            salary_max=self.salary_max,
            salary_currency=self.salary_currency,
        )


class JobUpdateRequest(BaseModel):
    """Partial update of a posting"""

    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    remote_ok: Optional[bool] = None
    status: Optional[JobPostingStatus] = None

    def to_changes(self) -> JobPostingChanges:
        return JobPostingChanges(
            title=self.title.strip() if self.title else None,
            description=self.description.strip() if self.description else None,
            location=self.location.strip() if self.location else None,
            remote_ok=self.remote_ok,
            status=self.status,
        )


class JobReviewRequest(BaseModel):
    """Admin approve/reject decision"""

    status: JobPostingStatus
    rejection_reason: Optional[str] = Field(None, max_length=2000)


class JobResponse(BaseModel):
    """Response schema for a single job posting"""

    id: UUID
    company_id: UUID
    title: str
    description: str
    location: str
    job_type: JobType
    experience_level: ExperienceLevel
    remote_ok: bool
    requirements: List[str]
    responsibilities: List[str]
    benefits: List[str]
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Optional[str] = None
    status: JobPostingStatus
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: JobPosting) -> "JobResponse":
        salary = job.salary_range
        return cls(
            id=job.id,
            company_id=job.company_id,
            title=job.title,
            description=job.description,
            location=job.location,
            job_type=job.job_type,
            experience_level=job.experience_level,
            remote_ok=job.remote_ok,
            requirements=list(job.requirements),
            responsibilities=list(job.responsibilities),
            benefits=list(job.benefits),
            salary_min=salary.min_salary if salary else None,
            salary_max=salary.max_salary if salary else None,
            salary_currency=salary.currency if salary else None,
            status=job.status,
            rejection_reason=job.rejection_reason,
            created_at=job.created_at,
            updated_at=job.updated_at,
            published_at=job.published_at,
        )


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class JobListResponse(BaseModel):
    """Paginated response for job list"""

    jobs: List[JobResponse]
    pagination: Pagination

    class Config:
        json_schema_extra = {
            "example": {
                "jobs": [],
                "pagination": {"page": 1, "limit": 20, "total": 100, "pages": 5}
            }
        }
