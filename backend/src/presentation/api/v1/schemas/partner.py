"""
Recruitment Partner Schemas
Pydantic schemas for partner signup, directory and moderation API
"""
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field

from domain.entities import RecruitmentPartner
from domain.value_objects import PartnerStatus
from application.services.recruitment_partners import PartnerSignup
from presentation.api.v1.schemas.job import Pagination


class PartnerCreateRequest(BaseModel):
    """Request schema for a recruitment partner signup"""

    company_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    specialty: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    website_url: Optional[str] = Field(None, max_length=500)
    address: Optional[str] = Field(None, max_length=500)
    contact_person: Optional[str] = Field(None, max_length=255)
    registration_number: Optional[str] = Field(None, max_length=100)
    years_in_business: Optional[int] = Field(None, ge=0)
    team_size: Optional[str] = Field(None, max_length=50)
    pricing_model: Optional[str] = Field(None, max_length=100)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    facebook_url: Optional[str] = Field(None, max_length=500)

    def to_signup(self) -> PartnerSignup:
        return PartnerSignup(**self.model_dump())


class PartnerReviewRequest(BaseModel):
    """Admin approve/reject/suspend decision"""

    status: PartnerStatus
    rejection_reason: Optional[str] = Field(None, max_length=2000)
    featured_months: Optional[int] = Field(None, ge=1, le=24, description="Feature an approved partner")


class PartnerResponse(BaseModel):
    """Response schema for a single recruitment partner"""

    id: UUID
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
    linkedin_url: Optional[str] = None
    facebook_url: Optional[str] = None
    status: PartnerStatus
    rejection_reason: Optional[str] = None
    is_featured: bool = False
    featured_until: Optional[datetime] = None
    created_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, partner: RecruitmentPartner) -> "PartnerResponse":
        return cls(
            id=partner.id,
            company_name=partner.company_name,
            email=partner.email,
            phone=partner.phone,
            specialty=partner.specialty,
            description=partner.description,
            website_url=partner.website_url,
            address=partner.address,
            contact_person=partner.contact_person,
            registration_number=partner.registration_number,
            years_in_business=partner.years_in_business,
            team_size=partner.team_size,
            pricing_model=partner.pricing_model,
            linkedin_url=partner.linkedin_url,
            facebook_url=partner.facebook_url,
            status=partner.status,
            rejection_reason=partner.rejection_reason,
            is_featured=partner.is_featured,
            featured_until=partner.featured_until,
            created_at=partner.created_at,
            approved_at=partner.approved_at,
        )


class PartnerListResponse(BaseModel):
    """Paginated partner directory"""

    partners: List[PartnerResponse]
    pagination: Pagination
