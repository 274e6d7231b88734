"""
ApplicationTrackingService Implementation
Submits, scores, ranks and moves job applications through review
"""
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from loguru import logger

from application.services.application_tracking import (
    IApplicationTrackingService,
    ApplicationSubmission,
)
from application.services.matching import ScoreCalculator, rank_applications, sort_applications
from application.repositories.interfaces import IApplicationRepository, IJobPostingRepository
from domain.entities import Application, JobPosting
from domain.value_objects import ApplicationStatus, CallerIdentity, Email
from core.exceptions import (
    AuthorizationException,
    DomainException,
    DuplicateResourceException,
    InvalidStateTransitionException,
    ResourceNotFoundException,
    ValidationException,
)


class ApplicationTrackingService(IApplicationTrackingService):
    """Application tracking service backed by job and application repositories"""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        job_repository: IJobPostingRepository,
        score_calculator: Optional[ScoreCalculator] = None,
    ):
        """
        Initialize application tracking service

        Args:
            application_repository: Application repository
            job_repository: Job posting repository
            score_calculator: Scorer, defaults to the configured keyword vocabulary
        """
        self.application_repo = application_repository
        self.job_repo = job_repository
        self.score_calculator = score_calculator or ScoreCalculator()

    async def submit_application(
        self,
        caller: CallerIdentity,
        submission: ApplicationSubmission
    ) -> Application:
        if not caller.is_applicant:
            raise AuthorizationException("Only applicants can submit applications")

        try:
            email = Email.parse(submission.email)
        except ValueError as e:
            raise ValidationException("email", str(e))

        job = await self.job_repo.get_by_id(submission.job_id)
        if not job or not job.is_approved():
            raise ResourceNotFoundException("JobPosting", str(submission.job_id))

        if await self.application_repo.exists_for_job(caller.user_id, job.id):
            logger.warning(f"Duplicate application by {caller.user_id} for job {job.id}")
            raise DuplicateResourceException("Application", "job_id", str(job.id))

        match_score = self._score_best_effort(job, submission)

        now = datetime.now(timezone.utc)
        application = Application(
            id=uuid4(),
            job_id=job.id,
            applicant_id=caller.user_id,
            email=str(email),
            phone=submission.phone,
            years_of_experience=submission.years_of_experience,
            skills=list(submission.skills or []),
            qualifications=list(submission.qualifications or []),
            cover_letter=submission.cover_letter,
            linkedin_url=submission.linkedin_url or None,
            portfolio_url=submission.portfolio_url or None,
            status=ApplicationStatus.PENDING,
            match_score=match_score,
            submitted_at=now,
            updated_at=now,
        )

        created = await self.application_repo.create(application)
        logger.info(
            f"Application {created.id} submitted for job {job.id} "
            f"by {caller.user_id} (score={created.match_score})"
        )
        return created

    def _score_best_effort(self, job: JobPosting, submission: ApplicationSubmission) -> Optional[int]:
        # Scoring enriches the record; a failure leaves it unscored
        try:
            score = self.score_calculator.calculate(
                title=job.title,
                description=job.description,
                years_of_experience=submission.years_of_experience,
                skills=submission.skills,
                qualifications=submission.qualifications,
            )
        except DomainException as e:
            logger.warning(f"Could not score application for job {job.id}: {e}")
            return None
        return score.value

    async def get_my_applications(self, caller: CallerIdentity) -> List[Application]:
        if not caller.is_applicant:
            raise AuthorizationException("Only applicants have submitted applications")

        applications = await self.application_repo.get_applicant_applications(caller.user_id)
        logger.info(f"Found {len(applications)} applications for applicant {caller.user_id}")
        return applications

    async def get_application(
        self,
        caller: CallerIdentity,
        application_id: UUID
    ) -> Application:
        application = await self._get_application_or_raise(application_id)

        if application.applicant_id == caller.user_id:
            return application

        job = await self._get_job_or_raise(application.job_id)
        self._ensure_can_review(caller, job)
        return application

    async def withdraw_application(
        self,
        caller: CallerIdentity,
        application_id: UUID
    ) -> None:
        application = await self._get_application_or_raise(application_id)

        if not caller.is_applicant or application.applicant_id != caller.user_id:
            raise AuthorizationException("Not authorized to withdraw this application")

        if not application.can_be_withdrawn():
            raise InvalidStateTransitionException(
                "Application", application.status.value, "withdrawn"
            )

        await self.application_repo.delete(application_id)
        logger.info(f"Application {application_id} withdrawn by {caller.user_id}")

    async def list_job_applications(
        self,
        caller: CallerIdentity,
        job_id: UUID
    ) -> List[Application]:
        job = await self._get_job_or_raise(job_id)
        self._ensure_can_review(caller, job)

        applications = await self.application_repo.get_job_applications(job_id)
        return sort_applications(applications)

    async def rank_applications(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        min_score: int = 0,
        limit: Optional[int] = None
    ) -> List[Application]:
        job = await self._get_job_or_raise(job_id)
        self._ensure_can_review(caller, job)

        applications = await self.application_repo.get_job_applications(job_id)
        ranked = rank_applications(applications, min_score=min_score, limit=limit)

        logger.info(
            f"Ranked {len(ranked)}/{len(applications)} applications for job {job_id} "
            f"(min_score={min_score}, limit={limit})"
        )
        return ranked

    async def update_status(
        self,
        caller: CallerIdentity,
        application_id: UUID,
        new_status: ApplicationStatus
    ) -> Application:
        application = await self._get_application_or_raise(application_id)
        job = await self._get_job_or_raise(application.job_id)
        self._ensure_can_review(caller, job)

        if not application.status.can_transition_to(new_status):
            logger.warning(
                f"Rejected status change for application {application_id}: "
                f"{application.status.value} -> {new_status.value}"
            )
            raise InvalidStateTransitionException(
                "Application", application.status.value, new_status.value
            )

        updated = await self.application_repo.update(replace(
            application,
            status=new_status,
            updated_at=datetime.now(timezone.utc),
        ))
        logger.info(
            f"Application {application_id} moved {application.status.value} -> "
            f"{new_status.value} by {caller}"
        )
        return updated

    async def _get_application_or_raise(self, application_id: UUID) -> Application:
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise ResourceNotFoundException("Application", str(application_id))
        return application

    async def _get_job_or_raise(self, job_id: UUID) -> JobPosting:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise ResourceNotFoundException("JobPosting", str(job_id))
        return job

    @staticmethod
    def _ensure_can_review(caller: CallerIdentity, job: JobPosting) -> None:
        if caller.is_admin or caller.owns_company(job.company_id):
            return
        logger.warning(f"{caller} denied access to applications of job {job.id}")
        raise AuthorizationException("Not authorized to view these applications")
