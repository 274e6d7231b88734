"""
Domain Enums
Business enumerations for the application
"""
from enum import Enum


class UserRole(str, Enum):
    """Roles issued by the identity provider"""
    APPLICANT = "applicant"
    EMPLOYER = "employer"
    ADMIN = "admin"


class JobType(str, Enum):
    """Job type classifications"""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ExperienceLevel(str, Enum):
    """Experience level classifications"""
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"
