"""
Recruitment Partner Service Interface
Partner signups, public directory and admin moderation
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from domain.entities import RecruitmentPartner
from domain.value_objects import CallerIdentity, PartnerStatus


@dataclass(frozen=True)
class PartnerSignup:
    """Agency details submitted by an employer"""

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


class IRecruitmentPartnerService(ABC):
    """Recruitment partner service interface"""

    @abstractmethod
    async def submit_partner(self, caller: CallerIdentity, signup: PartnerSignup) -> RecruitmentPartner:
        """
        Record a partner signup in pending status

        Raises:
            AuthorizationException: caller is not an employer
            DuplicateResourceException: a partner with this email exists
        """
        pass

    @abstractmethod
    async def list_approved_partners(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        specialty: Optional[str] = None
    ) -> Tuple[List[RecruitmentPartner], int]:
        """Public directory, featured first; returns (page, total)"""
        pass

    @abstractmethod
    async def get_approved_partner(self, partner_id: UUID) -> RecruitmentPartner:
        """Public single partner; non-approved partners are not found"""
        pass

    @abstractmethod
    async def list_pending_partners(self, caller: CallerIdentity) -> List[RecruitmentPartner]:
        """Signups awaiting review, oldest first (admin only)"""
        pass

    @abstractmethod
    async def review_partner(
        self,
        caller: CallerIdentity,
        partner_id: UUID,
        status: PartnerStatus,
        rejection_reason: Optional[str] = None,
        featured_months: Optional[int] = None
    ) -> RecruitmentPartner:
        """Approve, reject or suspend a partner (admin only)"""
        pass
