"""
RecruitmentPartnerService Implementation
Partner signups, public directory and admin moderation
"""
import calendar
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from loguru import logger

from application.services.recruitment_partners import (
    IRecruitmentPartnerService,
    PartnerSignup,
)
from application.repositories.interfaces import IRecruitmentPartnerRepository
from domain.entities import RecruitmentPartner
from domain.value_objects import (
    CallerIdentity,
    Email,
    PartnerStatus,
    PARTNER_REVIEW_OUTCOMES,
)
from core.config import settings
from core.exceptions import (
    AuthorizationException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)


def _add_months(moment: datetime, months: int) -> datetime:
    """Calendar month arithmetic, clamping to the last day of the target month"""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RecruitmentPartnerService(IRecruitmentPartnerService):
    """Recruitment partner service for employers, visitors and moderators"""

    def __init__(self, partner_repository: IRecruitmentPartnerRepository):
        self.partner_repo = partner_repository

    async def submit_partner(self, caller: CallerIdentity, signup: PartnerSignup) -> RecruitmentPartner:
        if not caller.is_employer:
            raise AuthorizationException("Only employers can register recruitment partners")

        try:
            email = Email.parse(signup.email)
        except ValueError as e:
            raise ValidationException("email", str(e))

        existing = await self.partner_repo.get_by_email(email.value)
        if existing:
            raise DuplicateResourceException("RecruitmentPartner", "email", email.value)

        now = datetime.now(timezone.utc)
        try:
            partner = RecruitmentPartner(
                id=uuid4(),
                submitted_by=caller.user_id,
                company_name=signup.company_name.strip(),
                email=email.value,
                phone=signup.phone.strip(),
                specialty=signup.specialty.strip(),
                description=signup.description.strip(),
                website_url=_clean(signup.website_url),
                address=_clean(signup.address),
                contact_person=_clean(signup.contact_person),
                registration_number=_clean(signup.registration_number),
                years_in_business=signup.years_in_business,
                team_size=_clean(signup.team_size),
                pricing_model=_clean(signup.pricing_model),
                linkedin_url=_clean(signup.linkedin_url),
                facebook_url=_clean(signup.facebook_url),
                status=PartnerStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
        except ValueError as e:
            raise ValidationException("partner", str(e))

        created = await self.partner_repo.create(partner)
        logger.info(f"Partner {created.id} submitted by {caller} and sent for approval")
        return created

    async def list_approved_partners(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        specialty: Optional[str] = None
    ) -> Tuple[List[RecruitmentPartner], int]:
        if limit is None:
            limit = settings.PARTNERS_PAGE_SIZE
        if page < 1:
            raise ValidationException("page", "must be at least 1")
        if not 1 <= limit <= settings.PARTNERS_MAX_PAGE_SIZE:
            raise ValidationException("limit", f"must be between 1 and {settings.PARTNERS_MAX_PAGE_SIZE}")

        search = _clean(search)
        specialty = _clean(specialty)

        partners = await self.partner_repo.find_by_status(
            PartnerStatus.APPROVED,
            search=search,
            specialty=specialty,
            directory_order=True,
            limit=limit,
            offset=(page - 1) * limit,
        )
        total = await self.partner_repo.count_by_status(
            PartnerStatus.APPROVED,
            search=search,
            specialty=specialty,
        )
        return partners, total

    async def get_approved_partner(self, partner_id: UUID) -> RecruitmentPartner:
        partner = await self.partner_repo.get_by_id(partner_id)
        if not partner or not partner.is_approved():
            raise ResourceNotFoundException("RecruitmentPartner", str(partner_id))
        return partner

    async def list_pending_partners(self, caller: CallerIdentity) -> List[RecruitmentPartner]:
        if not caller.is_admin:
            raise AuthorizationException("Admin access required")
        return await self.partner_repo.find_by_status(PartnerStatus.PENDING, directory_order=False)

    async def review_partner(
        self,
        caller: CallerIdentity,
        partner_id: UUID,
        status: PartnerStatus,
        rejection_reason: Optional[str] = None,
        featured_months: Optional[int] = None
    ) -> RecruitmentPartner:
        if not caller.is_admin:
            raise AuthorizationException("Admin access required")
        if status not in PARTNER_REVIEW_OUTCOMES:
            raise ValidationException("status", "must be 'approved', 'rejected' or 'suspended'")
        if featured_months is not None and featured_months < 1:
            raise ValidationException("featured_months", "must be at least 1")

        partner = await self.partner_repo.get_by_id(partner_id)
        if not partner:
            raise ResourceNotFoundException("RecruitmentPartner", str(partner_id))

        now = datetime.now(timezone.utc)
        fields = {"status": status, "updated_at": now}

        if status == PartnerStatus.APPROVED:
            fields["approved_at"] = now
            fields["rejection_reason"] = None
            if featured_months:
                fields["is_featured"] = True
                fields["featured_until"] = _add_months(now, featured_months)
        else:
            # Delisted partners lose their featured slot
            fields["is_featured"] = False
            fields["featured_until"] = None
            if status == PartnerStatus.REJECTED:
                fields["rejection_reason"] = _clean(rejection_reason)

        updated = await self.partner_repo.update(replace(partner, **fields))
        logger.info(f"Partner {partner_id} {status.value} by {caller}")
        return updated
