"""
Application Repository Implementation
SQLAlchemy-based job application repository
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, delete, exists
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import Application
from domain.value_objects import ApplicationStatus
from application.repositories.interfaces import IApplicationRepository
from infrastructure.persistence.models.application import ApplicationModel
from infrastructure.persistence.repositories.sql_helpers import violates_constraint
from core.exceptions import (
    DuplicateResourceException,
    RepositoryException,
    ResourceNotFoundException,
)


UNIQUE_APPLICATION_CONSTRAINT = "uq_applications_job_id_applicant_id"


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """SQLAlchemy implementation of application repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        try:
            result = await self.session.execute(
                select(ApplicationModel).where(ApplicationModel.id == application_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except SQLAlchemyError as e:
            logger.error(f"Failed to get application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to get application: {str(e)}")

    async def get_applicant_applications(self, applicant_id: UUID) -> List[Application]:
        """Get applications submitted by an applicant"""
        try:
            result = await self.session.execute(
                select(ApplicationModel)
                .where(ApplicationModel.applicant_id == applicant_id)
                .order_by(ApplicationModel.submitted_at.desc())
            )
            return [self._to_entity(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to get applications for applicant {applicant_id}: {str(e)}")
            raise RepositoryException(f"Failed to get applications: {str(e)}")

    async def get_job_applications(self, job_id: UUID) -> List[Application]:
        """Get every application for a job; ordering is left to the ranking service"""
        try:
            result = await self.session.execute(
                select(ApplicationModel).where(ApplicationModel.job_id == job_id)
            )
            return [self._to_entity(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to get applications for job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get applications: {str(e)}")

    async def create(self, application: Application) -> Application:
        """Create new application"""
        try:
            model = self._to_model(application)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except IntegrityError as e:
            if violates_constraint(e, UNIQUE_APPLICATION_CONSTRAINT):
                logger.warning(
                    f"Duplicate application for job {application.job_id} "
                    f"by {application.applicant_id}: {str(e.orig)}"
                )
                raise DuplicateResourceException("Application", "job_id", str(application.job_id))
            logger.error(f"Constraint violation creating application for job {application.job_id}: {str(e.orig)}")
            raise RepositoryException(f"Failed to create application: {str(e.orig)}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to create application for job {application.job_id}: {str(e)}")
            raise RepositoryException(f"Failed to create application: {str(e)}")

    async def update(self, application: Application) -> Application:
        """Update mutable application fields (status, score)"""
        try:
            result = await self.session.execute(
                select(ApplicationModel).where(ApplicationModel.id == application.id)
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to update application: {str(e)}")

        if not model:
            raise ResourceNotFoundException("Application", str(application.id))

        try:
            model.status = application.status.value
            model.match_score = application.match_score
            if application.updated_at:
                model.updated_at = application.updated_at

            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to update application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to update application: {str(e)}")

    async def delete(self, application_id: UUID) -> bool:
        """Delete application"""
        try:
            result = await self.session.execute(
                delete(ApplicationModel).where(ApplicationModel.id == application_id)
            )
            await self.session.flush()
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Failed to delete application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete application: {str(e)}")

    async def exists_for_job(self, applicant_id: UUID, job_id: UUID) -> bool:
        """Check if applicant already applied to job"""
        try:
            result = await self.session.execute(
                select(exists().where(
                    ApplicationModel.applicant_id == applicant_id,
                    ApplicationModel.job_id == job_id,
                ))
            )
            return bool(result.scalar())

        except SQLAlchemyError as e:
            logger.error(f"Failed to check application for job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to check application: {str(e)}")

    def _to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity"""
        return Application(
            id=model.id,
            job_id=model.job_id,
            applicant_id=model.applicant_id,
            email=model.email,
            phone=model.phone,
            years_of_experience=model.years_of_experience or 0,
            skills=list(model.skills or []),
            qualifications=list(model.qualifications or []),
            cover_letter=model.cover_letter,
            linkedin_url=model.linkedin_url,
            portfolio_url=model.portfolio_url,
            status=ApplicationStatus(model.status),
            match_score=model.match_score,
            submitted_at=model.submitted_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Application) -> ApplicationModel:
        """Convert domain entity to ORM model"""
        return ApplicationModel(
            id=entity.id,
            job_id=entity.job_id,
            applicant_id=entity.applicant_id,
            email=entity.email,
            phone=entity.phone,
            years_of_experience=entity.years_of_experience,
            skills=list(entity.skills),
            qualifications=list(entity.qualifications),
            cover_letter=entity.cover_letter,
            linkedin_url=entity.linkedin_url,
            portfolio_url=entity.portfolio_url,
            status=entity.status.value,
            match_score=entity.match_score,
            submitted_at=entity.submitted_at,
            updated_at=entity.updated_at,
        )
