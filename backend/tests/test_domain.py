"""
Tests for domain entities and value objects
"""
from uuid import uuid4

import pytest

from domain.entities import JobPosting
from domain.value_objects import ApplicationStatus, MatchScore, PartnerStatus


class TestJobPosting:
    """Test job posting invariants"""

    def test_description_may_be_empty(self, make_job):
        job = make_job(description="")

        assert job.description == ""

    def test_title_required(self, company_id):
        with pytest.raises(ValueError):
            JobPosting(id=uuid4(), company_id=company_id, title="  ", description="", location="Remote")


class TestApplication:
    """Test application helpers"""

    def test_is_scored(self, make_application):
        assert make_application(score=0).is_scored()
        assert not make_application(score=None).is_scored()


class TestApplicationStatus:
    """Test the review state machine"""

    @pytest.mark.parametrize("terminal", [ApplicationStatus.HIRED, ApplicationStatus.REJECTED])
    def test_terminal_states_have_no_exits(self, terminal):
        assert terminal.is_terminal
        assert not any(terminal.can_transition_to(target) for target in ApplicationStatus)

    def test_open_states_can_be_rejected(self):
        for status in (ApplicationStatus.PENDING, ApplicationStatus.REVIEWING, ApplicationStatus.SHORTLISTED):
            assert not status.is_terminal
            assert status.can_transition_to(ApplicationStatus.REJECTED)


class TestMatchScoreThreshold:
    """Test MatchScore.meets"""

    def test_threshold_is_inclusive(self):
        assert MatchScore(60).meets(60)
        assert not MatchScore(59).meets(60)
        assert MatchScore(0).meets(0)


class TestRecruitmentPartner:
    """Test partner invariants"""

    def test_new_partner_not_listed(self, make_partner):
        assert not make_partner().is_approved()
        assert make_partner(status=PartnerStatus.APPROVED).is_approved()

    @pytest.mark.parametrize("field", ["company_name", "phone", "specialty", "description"])
    def test_required_fields(self, make_partner, field):
        with pytest.raises(ValueError):
            make_partner(**{field: " "})

    def test_negative_years_rejected(self, make_partner):
        with pytest.raises(ValueError):
            make_partner(years_in_business=-1)
