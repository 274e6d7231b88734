"""
RecruitmentPartner Domain Entity
Recruitment agency that signed up to be listed in the partner directory
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..value_objects import PartnerStatus


@dataclass(frozen=True)
class RecruitmentPartner:
    """Recruitment partner domain entity - immutable"""

    id: UUID
    submitted_by: UUID

    # Agency
    company_name: str
    email: str
    phone: str
    specialty: str
    description: str
    website_url: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    registration_number: Optional[str] = None
    years_in_business: Optional[int] = None
    team_size: Optional[str] = None
    pricing_model: Optional[str] = None

    # Social
    linkedin_url: Optional[str] = None
    facebook_url: Optional[str] = None

    # Moderation
    status: PartnerStatus = PartnerStatus.PENDING
    rejection_reason: Optional[str] = None
    is_featured: bool = False
    featured_until: Optional[datetime] = None

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate partner data"""
        for name in ("company_name", "phone", "specialty", "description"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"Partner {name} cannot be empty")

        if self.years_in_business is not None and self.years_in_business < 0:
            raise ValueError("Years in business cannot be negative")

    def is_approved(self) -> bool:
        """Approved partners are listed in the public directory"""
        return self.status == PartnerStatus.APPROVED

    def __str__(self) -> str:
        return f"RecruitmentPartner({self.company_name}, status={self.status.value})"
