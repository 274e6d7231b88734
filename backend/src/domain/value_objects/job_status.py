"""
Job Status Enums
Status enumerations for job postings and applications
"""
from enum import Enum
from typing import Dict, FrozenSet


class JobPostingStatus(str, Enum):
    """Job posting moderation status"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    """Job application review status"""
    PENDING = "pending"
    REVIEWING = "reviewing"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_APPLICATION_STATUSES

    def can_transition_to(self, target: "ApplicationStatus") -> bool:
        """Forward one step, or straight to rejected from any open state"""
        if self.is_terminal:
            return False
        return target in APPLICATION_TRANSITIONS[self]


TERMINAL_APPLICATION_STATUSES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.HIRED,
    ApplicationStatus.REJECTED,
})

APPLICATION_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.REVIEWING,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.REVIEWING: frozenset({
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.SHORTLISTED: frozenset({
        ApplicationStatus.HIRED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.HIRED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

# Applicants may withdraw before a shortlist decision
WITHDRAWABLE_APPLICATION_STATUSES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.PENDING,
    ApplicationStatus.REVIEWING,
})
