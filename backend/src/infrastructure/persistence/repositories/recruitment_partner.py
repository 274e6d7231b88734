"""
Recruitment Partner Repository Implementation
SQLAlchemy-based recruitment partner repository
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, func, or_, and_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import RecruitmentPartner
from domain.value_objects import PartnerStatus
from application.repositories.interfaces import IRecruitmentPartnerRepository
from infrastructure.persistence.models.recruitment_partner import RecruitmentPartnerModel
from infrastructure.persistence.repositories.sql_helpers import (
    LIKE_ESCAPE,
    like_pattern,
    violates_constraint,
)
from core.exceptions import (
    DuplicateResourceException,
    RepositoryException,
    ResourceNotFoundException,
)


UNIQUE_PARTNER_EMAIL_CONSTRAINT = "uq_recruitment_partners_email"


class SQLAlchemyRecruitmentPartnerRepository(IRecruitmentPartnerRepository):
    """SQLAlchemy implementation of recruitment partner repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, partner_id: UUID) -> Optional[RecruitmentPartner]:
        """Get partner by ID"""
        try:
            result = await self.session.execute(
                select(RecruitmentPartnerModel).where(RecruitmentPartnerModel.id == partner_id)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Failed to get partner {partner_id}: {str(e)}")
            raise RepositoryException(f"Failed to get partner: {str(e)}")

    async def get_by_email(self, email: str) -> Optional[RecruitmentPartner]:
        """Get partner by contact email (case-insensitive)"""
        try:
            result = await self.session.execute(
                select(RecruitmentPartnerModel).where(
                    func.lower(RecruitmentPartnerModel.email) == email.lower()
                )
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Failed to get partner by email: {str(e)}")
            raise RepositoryException(f"Failed to get partner: {str(e)}")

    async def create(self, partner: RecruitmentPartner) -> RecruitmentPartner:
        """Create new partner signup"""
        try:
            model = self._to_model(partner)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except IntegrityError as e:
            if violates_constraint(e, UNIQUE_PARTNER_EMAIL_CONSTRAINT):
                logger.warning(f"Duplicate partner signup for {partner.email}")
                raise DuplicateResourceException("RecruitmentPartner", "email", partner.email)
            logger.error(f"Constraint violation creating partner {partner.company_name}: {str(e.orig)}")
            raise RepositoryException(f"Failed to create partner: {str(e.orig)}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to create partner {partner.company_name}: {str(e)}")
            raise RepositoryException(f"Failed to create partner: {str(e)}")

    async def update(self, partner: RecruitmentPartner) -> RecruitmentPartner:
        """Update moderation fields (status, featuring, timestamps)"""
        try:
            result = await self.session.execute(
                select(RecruitmentPartnerModel).where(RecruitmentPartnerModel.id == partner.id)
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load partner {partner.id}: {str(e)}")
            raise RepositoryException(f"Failed to update partner: {str(e)}")

        if not model:
            raise ResourceNotFoundException("RecruitmentPartner", str(partner.id))

        try:
            model.status = partner.status.value
            model.rejection_reason = partner.rejection_reason
            model.is_featured = partner.is_featured
            model.featured_until = partner.featured_until
            model.approved_at = partner.approved_at
            if partner.updated_at:
                model.updated_at = partner.updated_at

            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to update partner {partner.id}: {str(e)}")
            raise RepositoryException(f"Failed to update partner: {str(e)}")

    async def find_by_status(
        self,
        status: PartnerStatus,
        search: Optional[str] = None,
        specialty: Optional[str] = None,
        directory_order: bool = True,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[RecruitmentPartner]:
        """Find partners in a status with optional filters and pagination"""
        try:
            query = select(RecruitmentPartnerModel).where(
                self._conditions(status, search, specialty)
            )

            if directory_order:
                query = query.order_by(
                    RecruitmentPartnerModel.is_featured.desc(),
                    RecruitmentPartnerModel.created_at.desc(),
                )
            else:
                query = query.order_by(RecruitmentPartnerModel.created_at.asc())

            if limit is not None:
                query = query.limit(limit)
            if offset:
                query = query.offset(offset)

            result = await self.session.execute(query)
            return [self._to_entity(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to find {status.value} partners: {str(e)}")
            raise RepositoryException(f"Failed to find partners: {str(e)}")

    async def count_by_status(
        self,
        status: PartnerStatus,
        search: Optional[str] = None,
        specialty: Optional[str] = None
    ) -> int:
        """Count partners matching the filters"""
        try:
            result = await self.session.execute(
                select(func.count(RecruitmentPartnerModel.id)).where(
                    self._conditions(status, search, specialty)
                )
            )
            return int(result.scalar_one())

        except SQLAlchemyError as e:
            logger.error(f"Failed to count {status.value} partners: {str(e)}")
            raise RepositoryException(f"Failed to count partners: {str(e)}")

    @staticmethod
    def _conditions(
        status: PartnerStatus,
        search: Optional[str],
        specialty: Optional[str]
    ):
        conditions = [RecruitmentPartnerModel.status == status.value]

        if search:
            pattern = like_pattern(search)
            conditions.append(or_(
                RecruitmentPartnerModel.company_name.ilike(pattern, escape=LIKE_ESCAPE),
                RecruitmentPartnerModel.specialty.ilike(pattern, escape=LIKE_ESCAPE),
                RecruitmentPartnerModel.description.ilike(pattern, escape=LIKE_ESCAPE),
            ))

        if specialty:
            conditions.append(
                RecruitmentPartnerModel.specialty.ilike(like_pattern(specialty), escape=LIKE_ESCAPE)
            )

        return and_(*conditions)

    def _to_entity(self, model: RecruitmentPartnerModel) -> RecruitmentPartner:
        """Convert ORM model to domain entity"""
        return RecruitmentPartner(
            id=model.id,
            submitted_by=model.submitted_by,
            company_name=model.company_name,
            email=model.email,
            phone=model.phone,
            specialty=model.specialty,
            description=model.description,
            website_url=model.website_url,
            address=model.address,
            contact_person=model.contact_person,
            registration_number=model.registration_number,
            years_in_business=model.years_in_business,
            team_size=model.team_size,
            pricing_model=model.pricing_model,
            linkedin_url=model.linkedin_url,
            facebook_url=model.facebook_url,
            status=PartnerStatus(model.status),
            rejection_reason=model.rejection_reason,
            is_featured=bool(model.is_featured),
            featured_until=model.featured_until,
            created_at=model.created_at,
            updated_at=model.updated_at,
            approved_at=model.approved_at,
        )

    def _to_model(self, entity: RecruitmentPartner) -> RecruitmentPartnerModel:
        """Convert domain entity to ORM model"""
        return RecruitmentPartnerModel(
            id=entity.id,
            submitted_by=entity.submitted_by,
            company_name=entity.company_name,
            email=entity.email,
            phone=entity.phone,
            specialty=entity.specialty,
            description=entity.description,
            website_url=entity.website_url,
            address=entity.address,
            contact_person=entity.contact_person,
            registration_number=entity.registration_number,
            years_in_business=entity.years_in_business,
            team_size=entity.team_size,
            pricing_model=entity.pricing_model,
            linkedin_url=entity.linkedin_url,
            facebook_url=entity.facebook_url,
            status=entity.status.value,
            rejection_reason=entity.rejection_reason,
            is_featured=entity.is_featured,
            featured_until=entity.featured_until,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            approved_at=entity.approved_at,
        )
