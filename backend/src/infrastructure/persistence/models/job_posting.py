"""
JobPosting ORM Model
SQLAlchemy model for employer job postings
"""
import uuid
from sqlalchemy import Column, String, Integer, DateTime, Boolean, ARRAY, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base


class JobPostingModel(Base):
    """Job posting table ORM model"""

    __tablename__ = "job_postings"

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Owner
    company_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    # Basic Info
    title = Column(String(500), nullable=False, index=True)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)

    # Job Details
    job_type = Column(String(50), nullable=False, default="full-time")
    experience_level = Column(String(50), nullable=False, default="mid")
    remote_ok = Column(Boolean, nullable=False, default=False)
    requirements = Column(ARRAY(String), nullable=False, default=list)
    responsibilities = Column(ARRAY(String), nullable=False, default=list)
    benefits = Column(ARRAY(String), nullable=False, default=list)

    # Salary
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    salary_currency = Column(String(10), nullable=False, default="USD")

    # Moderation
    status = Column(String(50), nullable=False, default="pending", index=True)
    rejection_reason = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<JobPostingModel {self.title} - {self.status}>"
