"""
Application ORM Model
SQLAlchemy model for job applications
"""
import uuid
from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, ARRAY, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base


class ApplicationModel(Base):
    """Job application table ORM model"""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_id_applicant_id"),
    )

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Foreign Keys
    job_id = Column(
        UUID(as_uuid=True),
        ForeignKey("job_postings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    # Contact
    email = Column(String(320), nullable=False)
    phone = Column(String(50), nullable=True)

    # Candidate Attributes
    years_of_experience = Column(Integer, nullable=False, default=0)
    skills = Column(ARRAY(String), nullable=False, default=list)
    qualifications = Column(ARRAY(String), nullable=False, default=list)
    cover_letter = Column(Text, nullable=True)

    # Links
    linkedin_url = Column(String(1000), nullable=True)
    portfolio_url = Column(String(1000), nullable=True)

    # Review
    status = Column(String(50), nullable=False, default="pending", index=True)
    match_score = Column(Integer, nullable=True, index=True)

    # Timestamps
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<ApplicationModel {self.id} - {self.status}>"
