"""
Job Posting Repository Implementation
SQLAlchemy-based job posting repository
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, func, or_, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import JobPosting
from domain.enums import JobType, ExperienceLevel
from domain.value_objects import JobPostingStatus, SalaryRange
from application.repositories.interfaces import IJobPostingRepository
from infrastructure.persistence.models.job_posting import JobPostingModel
from infrastructure.persistence.repositories.sql_helpers import LIKE_ESCAPE, like_pattern
from core.exceptions import RepositoryException, ResourceNotFoundException


class SQLAlchemyJobPostingRepository(IJobPostingRepository):
    """SQLAlchemy implementation of job posting repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Get job posting by ID"""
        try:
            result = await self.session.execute(
                select(JobPostingModel).where(JobPostingModel.id == job_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except SQLAlchemyError as e:
            logger.error(f"Failed to get job posting {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get job posting: {str(e)}")

    async def create(self, job: JobPosting) -> JobPosting:
        """Create new job posting"""
        try:
            model = self._to_model(job)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to create job posting {job.title}: {str(e)}")
            raise RepositoryException(f"Failed to create job posting: {str(e)}")

    async def update(self, job: JobPosting) -> JobPosting:
        """Update existing job posting"""
        try:
            result = await self.session.execute(
                select(JobPostingModel).where(JobPostingModel.id == job.id)
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load job posting {job.id}: {str(e)}")
            raise RepositoryException(f"Failed to update job posting: {str(e)}")

        if not model:
            raise ResourceNotFoundException("JobPosting", str(job.id))

        try:
            model.title = job.title
            model.description = job.description
            model.location = job.location
            model.job_type = job.job_type.value
            model.experience_level = job.experience_level.value
            model.remote_ok = job.remote_ok
            model.requirements = list(job.requirements)
            model.responsibilities = list(job.responsibilities)
            model.benefits = list(job.benefits)
            model.salary_min = job.salary_range.min_salary if job.salary_range else None
            model.salary_max = job.salary_range.max_salary if job.salary_range else None
            if job.salary_range:
                model.salary_currency = job.salary_range.currency
            model.status = job.status.value
            model.rejection_reason = job.rejection_reason
            model.published_at = job.published_at

            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to update job posting {job.id}: {str(e)}")
            raise RepositoryException(f"Failed to update job posting: {str(e)}")

    async def find_by_status(
        self,
        status: JobPostingStatus,
        search: Optional[str] = None,
        location: Optional[str] = None,
        remote_only: bool = False,
        newest_first: bool = True,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[JobPosting]:
        """Find postings in a status with optional filters and pagination"""
        try:
            query = select(JobPostingModel).where(
                self._conditions(status, search, location, remote_only)
            )

            order = JobPostingModel.created_at.desc() if newest_first else JobPostingModel.created_at.asc()
            query = query.order_by(order)

            if limit is not None:
                query = query.limit(limit)
            if offset:
                query = query.offset(offset)

            result = await self.session.execute(query)
            return [self._to_entity(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to find {status.value} job postings: {str(e)}")
            raise RepositoryException(f"Failed to find job postings: {str(e)}")

    async def count_by_status(
        self,
        status: JobPostingStatus,
        search: Optional[str] = None,
        location: Optional[str] = None,
        remote_only: bool = False
    ) -> int:
        """Count postings matching the filters"""
        try:
            result = await self.session.execute(
                select(func.count(JobPostingModel.id)).where(
                    self._conditions(status, search, location, remote_only)
                )
            )
            return int(result.scalar_one())

        except SQLAlchemyError as e:
            logger.error(f"Failed to count {status.value} job postings: {str(e)}")
            raise RepositoryException(f"Failed to count job postings: {str(e)}")

    async def find_by_company(self, company_id: UUID) -> List[JobPosting]:
        """Get all postings of a company"""
        try:
            result = await self.session.execute(
                select(JobPostingModel)
                .where(JobPostingModel.company_id == company_id)
                .order_by(JobPostingModel.created_at.desc())
            )
            return [self._to_entity(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to find job postings for company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to find job postings: {str(e)}")

    @staticmethod
    def _conditions(
        status: JobPostingStatus,
        search: Optional[str],
        location: Optional[str],
        remote_only: bool
    ):
        conditions = [JobPostingModel.status == status.value]

        if search:
            pattern = like_pattern(search)
            conditions.append(or_(
                JobPostingModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                JobPostingModel.description.ilike(pattern, escape=LIKE_ESCAPE),
            ))

        if location:
            conditions.append(JobPostingModel.location.ilike(like_pattern(location), escape=LIKE_ESCAPE))

        if remote_only:
            conditions.append(JobPostingModel.remote_ok.is_(True))

        return and_(*conditions)

    def _to_entity(self, model: JobPostingModel) -> JobPosting:
        """Convert ORM model to domain entity"""
        salary_range = None
        if model.salary_min is not None or model.salary_max is not None:
            salary_range = SalaryRange(
                min_salary=model.salary_min,
                max_salary=model.salary_max,
                currency=model.salary_currency or "USD",
            )

        return JobPosting(
            id=model.id,
            company_id=model.company_id,
            title=model.title,
            description=model.description,
            location=model.location,
            job_type=JobType(model.job_type),
            experience_level=ExperienceLevel(model.experience_level),
            remote_ok=bool(model.remote_ok),
            requirements=list(model.requirements or []),
            responsibilities=list(model.responsibilities or []),
            benefits=list(model.benefits or []),
            salary_range=salary_range,
            status=JobPostingStatus(model.status),
            rejection_reason=model.rejection_reason,
            created_at=model.created_at,
            updated_at=model.updated_at,
            published_at=model.published_at,
        )

    def _to_model(self, entity: JobPosting) -> JobPostingModel:
        """Convert domain entity to ORM model"""
        return JobPostingModel(
            id=entity.id,
            company_id=entity.company_id,
            title=entity.title,
            description=entity.description,
            location=entity.location,
            job_type=entity.job_type.value,
            experience_level=entity.experience_level.value,
            remote_ok=entity.remote_ok,
            requirements=list(entity.requirements),
            responsibilities=list(entity.responsibilities),
            benefits=list(entity.benefits),
            salary_min=entity.salary_range.min_salary if entity.salary_range else None,
            salary_max=entity.salary_range.max_salary if entity.salary_range else None,
            salary_currency=entity.salary_range.currency if entity.salary_range else "USD",
            status=entity.status.value,
            rejection_reason=entity.rejection_reason,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            published_at=entity.published_at,
        )
