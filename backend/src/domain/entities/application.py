"""
Application Domain Entity
Immutable job application business object
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from ..value_objects import (
    ApplicationStatus,
    ScoreTier,
    WITHDRAWABLE_APPLICATION_STATUSES,
)


@dataclass(frozen=True)
class Application:
    """Job application domain entity - immutable"""

    id: UUID
    job_id: UUID
    applicant_id: UUID

    # Contact
    email: str
    phone: Optional[str] = None

    # Candidate attributes (caller-supplied, order kept, not deduplicated)
    years_of_experience: int = 0
    skills: List[str] = field(default_factory=list)
    qualifications: List[str] = field(default_factory=list)
    cover_letter: Optional[str] = None

    # Links
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None

    # Review
    status: ApplicationStatus = ApplicationStatus.PENDING
    match_score: Optional[int] = None  # None until scored

    # Timestamps
    submitted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate application data"""
        if self.match_score is not None and not (0 <= self.match_score <= 100):
            raise ValueError("Match score must be between 0 and 100")

    @property
    def score_tier(self) -> ScoreTier:
        return ScoreTier.for_score(self.match_score)

    def is_scored(self) -> bool:
        return self.match_score is not None

    def can_be_withdrawn(self) -> bool:
        return self.status in WITHDRAWABLE_APPLICATION_STATUSES

    def __str__(self) -> str:
        return f"Application({self.id}, status={self.status.value}, score={self.match_score})"
