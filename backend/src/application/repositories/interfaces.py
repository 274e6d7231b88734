"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID

from domain.entities import JobPosting, Application, RecruitmentPartner
from domain.value_objects import JobPostingStatus, PartnerStatus


class IJobPostingRepository(ABC):
    """Job posting repository interface"""

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Get job posting by ID, any status"""
        pass

    @abstractmethod
    async def create(self, job: JobPosting) -> JobPosting:
        """Create new job posting"""
        pass

    @abstractmethod
    async def update(self, job: JobPosting) -> JobPosting:
        """Update existing job posting"""
        pass

    @abstractmethod
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
        """Find postings in a status with optional text filters"""
        pass

    @abstractmethod
    async def count_by_status(
        self,
        status: JobPostingStatus,
        search: Optional[str] = None,
        location: Optional[str] = None,
        remote_only: bool = False
    ) -> int:
        """Count postings matching the same filters as find_by_status"""
        pass

    @abstractmethod
    async def find_by_company(self, company_id: UUID) -> List[JobPosting]:
        """Get all postings for a company, newest first"""
        pass


class IApplicationRepository(ABC):
    """Application repository interface"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_applicant_applications(self, applicant_id: UUID) -> List[Application]:
        """Get all applications submitted by an applicant, newest first"""
        pass

    @abstractmethod
    async def get_job_applications(self, job_id: UUID) -> List[Application]:
        """Get all applications for a job, unordered"""
        pass

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """Create new application"""
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """Update existing application"""
        pass

    @abstractmethod
    async def delete(self, application_id: UUID) -> bool:
        """Delete application"""
        pass

    @abstractmethod
    async def exists_for_job(self, applicant_id: UUID, job_id: UUID) -> bool:
        """Check if applicant already applied to job"""
        pass


class IRecruitmentPartnerRepository(ABC):
    """Recruitment partner repository interface"""

    @abstractmethod
    async def get_by_id(self, partner_id: UUID) -> Optional[RecruitmentPartner]:
        """Get partner by ID, any status"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[RecruitmentPartner]:
        """Get partner by contact email"""
        pass

    @abstractmethod
    async def create(self, partner: RecruitmentPartner) -> RecruitmentPartner:
        """Create new partner signup"""
        pass

    @abstractmethod
    async def update(self, partner: RecruitmentPartner) -> RecruitmentPartner:
        """Update moderation fields of a partner"""
        pass

    @abstractmethod
    async def find_by_status(
        self,
        status: PartnerStatus,
        search: Optional[str] = None,
        specialty: Optional[str] = None,
        directory_order: bool = True,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[RecruitmentPartner]:
        """
        Find partners in a status

        Args:
            directory_order: Featured first then newest; False means oldest first
        """
        pass

    @abstractmethod
    async def count_by_status(
        self,
        status: PartnerStatus,
        search: Optional[str] = None,
        specialty: Optional[str] = None
    ) -> int:
        """Count partners matching the filters"""
        pass
