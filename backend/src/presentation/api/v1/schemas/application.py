"""
Application Schemas
Pydantic schemas for application submission and employer review
"""
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field

from domain.entities import Application
from domain.value_objects import ApplicationStatus
from application.services.application_tracking import ApplicationSubmission
from application.services.matching import describe_score


class ApplicationCreateRequest(BaseModel):
    """Request schema for submitting an application"""

    job_id: UUID
    email: str = Field(..., min_length=3, max_length=320)
    phone: Optional[str] = Field(None, max_length=50)
    years_of_experience: int = Field(0, ge=0, le=80)
    skills: List[str] = Field(default_factory=list, max_length=100)
    qualifications: List[str] = Field(default_factory=list, max_length=100)
    cover_letter: Optional[str] = None
    linkedin_url: Optional[str] = Field(None, max_length=1000)
    portfolio_url: Optional[str] = Field(None, max_length=1000)

    class Config:
        json_schema_extra = {
            "example": {
                "job_id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "jane@example.com",
                "phone": "+1 555 0100",
                "years_of_experience": 6,
                "skills": ["React", "JavaScript"],
                "qualifications": ["BSc Computer Science"],
                "cover_letter": "I would love to join...",
                "linkedin_url": "https://linkedin.com/in/jane"
            }
        }

    def to_submission(self) -> ApplicationSubmission:
        return ApplicationSubmission(
            job_id=self.job_id,
            email=self.email,
            phone=self.phone,
            years_of_experience=self.years_of_experience,
            skills=[s.strip() for s in self.skills if s and s.strip()],
            qualifications=[q.strip() for q in self.qualifications if q and q.strip()],
            cover_letter=self.cover_letter,
            linkedin_url=self.linkedin_url,
            portfolio_url=self.portfolio_url,
        )


class StatusUpdateRequest(BaseModel):
    """Request schema for moving an application through review"""

    status: ApplicationStatus


class ScoreTierResponse(BaseModel):
    """Display tier for a match score"""

    tier: str
    label: str
    weight: int
    color: str


class ApplicationResponse(BaseModel):
    """Response schema for a single application"""

    id: UUID
    job_id: UUID
    applicant_id: UUID
    email: str
    phone: Optional[str] = None
    years_of_experience: int
    skills: List[str]
    qualifications: List[str]
    cover_letter: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    status: ApplicationStatus
    match_score: Optional[int] = Field(None, description="Match score (0-100), null when unscored")
    score_tier: ScoreTierResponse
    submitted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id,
            job_id=application.job_id,
            applicant_id=application.applicant_id,
            email=application.email,
            phone=application.phone,
            years_of_experience=application.years_of_experience,
            skills=list(application.skills),
            qualifications=list(application.qualifications),
            cover_letter=application.cover_letter,
            linkedin_url=application.linkedin_url,
            portfolio_url=application.portfolio_url,
            status=application.status,
            match_score=application.match_score,
            score_tier=ScoreTierResponse(**describe_score(application.match_score)),
            submitted_at=application.submitted_at,
            updated_at=application.updated_at,
        )


class ApplicationListResponse(BaseModel):
    """List of applications"""

    applications: List[ApplicationResponse]
    count: int


class RankedApplicationsResponse(BaseModel):
    """Ranked candidates for a job"""

    job_id: UUID
    candidates: List[ApplicationResponse]
    count: int
    min_score: int
    limit: int


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    message: str
