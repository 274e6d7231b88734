"""Value Objects - Immutable objects defined by their attributes"""

from .email import Email
from .salary_range import SalaryRange
from .job_status import (
    JobPostingStatus,
    ApplicationStatus,
    APPLICATION_TRANSITIONS,
    WITHDRAWABLE_APPLICATION_STATUSES,
)
from .score_tier import ScoreTier
from .match_score import MatchScore
from .caller_identity import CallerIdentity
from .partner_status import PartnerStatus, PARTNER_REVIEW_OUTCOMES
__all__ = [
    "Email",
    "SalaryRange",
    "JobPostingStatus",
    "ApplicationStatus",
    "APPLICATION_TRANSITIONS",
    "WITHDRAWABLE_APPLICATION_STATUSES",
    "ScoreTier",
    "MatchScore",
    "CallerIdentity",
    "PartnerStatus",
    "PARTNER_REVIEW_OUTCOMES",
]
