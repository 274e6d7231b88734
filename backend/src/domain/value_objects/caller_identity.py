"""
CallerIdentity Value Object
Authenticated caller as supplied by the identity provider
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from ..enums import UserRole


@dataclass(frozen=True)
class CallerIdentity:
    """Who is making the request - immutable"""

    user_id: UUID
    role: UserRole
    company_id: Optional[UUID] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER

    @property
    def is_applicant(self) -> bool:
        return self.role == UserRole.APPLICANT

    def owns_company(self, company_id: UUID) -> bool:
        """Check if caller is an employer linked to the given company"""
        return self.is_employer and self.company_id is not None and self.company_id == company_id

    def __str__(self) -> str:
        return f"{self.role.value}:{self.user_id}"
