"""
Partner Status Enum
Moderation status for recruitment-partner signups
"""
from enum import Enum
from typing import FrozenSet


class PartnerStatus(str, Enum):
    """Recruitment partner moderation status"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


# Outcomes an admin may set on a partner
PARTNER_REVIEW_OUTCOMES: FrozenSet[PartnerStatus] = frozenset({
    PartnerStatus.APPROVED,
    PartnerStatus.REJECTED,
    PartnerStatus.SUSPENDED,
})
