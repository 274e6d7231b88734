"""
RecruitmentPartner ORM Model
SQLAlchemy model for recruitment-partner signups
"""
import uuid
from sqlalchemy import Column, String, Integer, DateTime, Boolean, Text, UniqueConstraint, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base


class RecruitmentPartnerModel(Base):
    """Recruitment partner table ORM model"""

    __tablename__ = "recruitment_partners"
    __table_args__ = (
        UniqueConstraint("email", name="uq_recruitment_partners_email"),
        CheckConstraint(
            "years_in_business IS NULL OR years_in_business >= 0",
            name="ck_recruitment_partners_years",
        ),
    )

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    submitted_by = Column(UUID(as_uuid=True), nullable=False, index=True)

    # Agency
    company_name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(50), nullable=False)
    specialty = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    website_url = Column(String(1000), nullable=True)
    address = Column(String(500), nullable=True)
    contact_person = Column(String(255), nullable=True)
    registration_number = Column(String(100), nullable=True)
    years_in_business = Column(Integer, nullable=True)
    team_size = Column(String(50), nullable=True)
    pricing_model = Column(String(255), nullable=True)

    # Social
    linkedin_url = Column(String(1000), nullable=True)
    facebook_url = Column(String(1000), nullable=True)

    # Moderation
    status = Column(String(50), nullable=False, default="pending", index=True)
    rejection_reason = Column(Text, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    featured_until = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    approved_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<RecruitmentPartnerModel {self.company_name} - {self.status}>"
