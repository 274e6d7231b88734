"""Domain Entities - Core business objects"""

from .job_posting import JobPosting
from .application import Application
from .recruitment_partner import RecruitmentPartner
__all__ = ["JobPosting", "Application", "RecruitmentPartner"]
