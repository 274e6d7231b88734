"""
JobPosting Domain Entity
Immutable employer-authored opening
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from ..value_objects import SalaryRange, JobPostingStatus
from ..enums import JobType, ExperienceLevel


@dataclass(frozen=True)
class JobPosting:
    """Job posting domain entity - immutable"""

    id: UUID
    company_id: UUID
    title: str
    description: str  # may be empty
    location: str

    # Job details
    job_type: JobType = JobType.FULL_TIME
    experience_level: ExperienceLevel = ExperienceLevel.MID
    remote_ok: bool = False
    requirements: List[str] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)

    # Salary
    salary_range: Optional[SalaryRange] = None

    # Moderation
    status: JobPostingStatus = JobPostingStatus.PENDING
    rejection_reason: Optional[str] = None

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data"""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Job title cannot be empty")

    def is_approved(self) -> bool:
        """Approved postings are publicly visible and accept applications"""
        return self.status == JobPostingStatus.APPROVED

    def is_closed(self) -> bool:
        return self.status == JobPostingStatus.CLOSED

    def __str__(self) -> str:
        return f"JobPosting({self.title}, status={self.status.value})"
