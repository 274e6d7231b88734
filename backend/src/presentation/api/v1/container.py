"""
Dependency Injection Container
Manages service and repository instances
"""
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends

from core.database import get_db
from application.repositories.interfaces import (
    IApplicationRepository,
    IJobPostingRepository,
    IRecruitmentPartnerRepository,
)
from application.services.auth.interfaces import IJwtService
from application.services.application_tracking import IApplicationTrackingService
from application.services.job_postings import IJobPostingService
from application.services.recruitment_partners import IRecruitmentPartnerService
from application.services.matching import ScoreCalculator
from infrastructure.persistence.repositories.application import SQLAlchemyApplicationRepository
from infrastructure.persistence.repositories.job_posting import SQLAlchemyJobPostingRepository
from infrastructure.persistence.repositories.recruitment_partner import SQLAlchemyRecruitmentPartnerRepository
from infrastructure.security.jwt_service import JwtService


# Singleton instances
_jwt_service: IJwtService | None = None
_score_calculator: ScoreCalculator | None = None


def get_jwt_service() -> IJwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService()
    return _jwt_service


def get_score_calculator() -> ScoreCalculator:
    """Get score calculator instance (singleton, stateless)"""
    global _score_calculator
    if _score_calculator is None:
        _score_calculator = ScoreCalculator()
    return _score_calculator


def get_job_posting_repository(
    session: AsyncSession = Depends(get_db)
) -> IJobPostingRepository:
    """Get job posting repository instance (per-request)"""
    return SQLAlchemyJobPostingRepository(session)


def get_application_repository(
    session: AsyncSession = Depends(get_db)
) -> IApplicationRepository:
    """Get application repository instance (per-request)"""
    return SQLAlchemyApplicationRepository(session)


def get_application_tracking_service(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    job_repo: IJobPostingRepository = Depends(get_job_posting_repository),
    score_calculator: ScoreCalculator = Depends(get_score_calculator)
) -> IApplicationTrackingService:
    """Get application tracking service instance (per-request)"""
    from infrastructure.services.application_tracking_service import ApplicationTrackingService
    return ApplicationTrackingService(application_repo, job_repo, score_calculator)


def get_job_posting_service(
    job_repo: IJobPostingRepository = Depends(get_job_posting_repository)
) -> IJobPostingService:
    """Get job posting service instance (per-request)"""
    from infrastructure.services.job_posting_service import JobPostingService
    return JobPostingService(job_repo)


def get_recruitment_partner_repository(
    session: AsyncSession = Depends(get_db)
) -> IRecruitmentPartnerRepository:
    """Get recruitment partner repository instance (per-request)"""
    return SQLAlchemyRecruitmentPartnerRepository(session)


def get_recruitment_partner_service(
    partner_repo: IRecruitmentPartnerRepository = Depends(get_recruitment_partner_repository)
) -> IRecruitmentPartnerService:
    """Get recruitment partner service instance (per-request)"""
    from infrastructure.services.recruitment_partner_service import RecruitmentPartnerService
    return RecruitmentPartnerService(partner_repo)
