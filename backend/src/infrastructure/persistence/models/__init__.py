"""ORM Models Package"""

from .job_posting import JobPostingModel
from .application import ApplicationModel
from .recruitment_partner import RecruitmentPartnerModel

__all__ = [
    "JobPostingModel",
    "ApplicationModel",
    "RecruitmentPartnerModel",
]
