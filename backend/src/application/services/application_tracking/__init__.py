"""
Application Tracking Service Interface
Submission, employer review queue and status changes for applications
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from domain.entities import Application
from domain.value_objects import ApplicationStatus, CallerIdentity


@dataclass(frozen=True)
class ApplicationSubmission:
    """Raw candidate attributes as posted by the applicant"""

    job_id: UUID
    email: str
    years_of_experience: int = 0
    phone: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    qualifications: List[str] = field(default_factory=list)
    cover_letter: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None


class IApplicationTrackingService(ABC):
    """Application tracking service interface"""

    @abstractmethod
    async def submit_application(
        self,
        caller: CallerIdentity,
        submission: ApplicationSubmission
    ) -> Application:
        """
        Create an application and score it

        Raises:
            AuthorizationException: caller is not an applicant
            ResourceNotFoundException: job missing or not approved
            DuplicateResourceException: caller already applied to the job
        """
        pass

    @abstractmethod
    async def get_my_applications(self, caller: CallerIdentity) -> List[Application]:
        """Applications submitted by the caller, newest first"""
        pass

    @abstractmethod
    async def get_application(
        self,
        caller: CallerIdentity,
        application_id: UUID
    ) -> Application:
        """Single application visible to its owner, the job's employer or an admin"""
        pass

    @abstractmethod
    async def withdraw_application(
        self,
        caller: CallerIdentity,
        application_id: UUID
    ) -> None:
        """Delete the caller's own application while it is still open"""
        pass

    @abstractmethod
    async def list_job_applications(
        self,
        caller: CallerIdentity,
        job_id: UUID
    ) -> List[Application]:
        """All applications for a job in review order, unfiltered"""
        pass

    @abstractmethod
    async def rank_applications(
        self,
        caller: CallerIdentity,
        job_id: UUID,
        min_score: int = 0,
        limit: Optional[int] = None
    ) -> List[Application]:
        """
        Applications for a job ordered by score, filtered by threshold

        Args:
            caller: Owning employer or admin
            job_id: Job posting ID
            min_score: Scored applications below this are excluded
            limit: Maximum results, None for unbounded

        Returns:
            Ordered list of Application entities
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        caller: CallerIdentity,
        application_id: UUID,
        new_status: ApplicationStatus
    ) -> Application:
        """
        Move an application through the review state machine

        Raises:
            InvalidStateTransitionException: move not allowed from current status
        """
        pass
