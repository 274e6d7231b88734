"""
API tests for the application, job and partner endpoints
"""
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from main import app
from core.exceptions import (
    DuplicateResourceException,
    InvalidStateTransitionException,
    ResourceNotFoundException,
)
from domain.value_objects import ApplicationStatus, PartnerStatus
from infrastructure.security.jwt_service import JwtService
from presentation.api.v1.container import (
    get_application_tracking_service,
    get_job_posting_service,
    get_recruitment_partner_service,
)


@pytest.fixture
def tracking_service():
    service = AsyncMock()
    app.dependency_overrides[get_application_tracking_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_application_tracking_service, None)


@pytest.fixture
def job_service():
    service = AsyncMock()
    app.dependency_overrides[get_job_posting_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_job_posting_service, None)


@pytest.fixture
def partner_service():
    service = AsyncMock()
    app.dependency_overrides[get_recruitment_partner_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_recruitment_partner_service, None)


@pytest.fixture
def client():
    return TestClient(app)


def _auth(caller):
    token = JwtService().create_access_token(caller)
    return {"Authorization": f"Bearer {token}"}


class TestSubmitEndpoint:
    """POST /api/v1/applications"""

    def test_requires_token(self, client, tracking_service):
        response = client.post("/api/v1/applications", json={"job_id": str(uuid4()), "email": "a@b.co"})

        assert response.status_code == 401

    def test_employer_forbidden(self, client, tracking_service, employer):
        response = client.post(
            "/api/v1/applications",
            json={"job_id": str(uuid4()), "email": "a@b.co"},
            headers=_auth(employer),
        )

        assert response.status_code == 403
        tracking_service.submit_application.assert_not_awaited()

    def test_created_with_score_tier(self, client, tracking_service, applicant, make_application):
        application = make_application(score=75, applicant_id=applicant.user_id)
        tracking_service.submit_application.return_value = application

        response = client.post(
            "/api/v1/applications",
            json={
                "job_id": str(application.job_id),
                "email": "candidate@example.com",
                "years_of_experience": 6,
                "skills": ["React", " JavaScript ", ""],
            },
            headers=_auth(applicant),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["match_score"] == 75
        assert body["score_tier"] == {"tier": "good", "label": "Good Match", "weight": 3, "color": "blue"}

        submission = tracking_service.submit_application.call_args.args[1]
        assert submission.skills == ["React", "JavaScript"]

    def test_negative_experience_rejected_by_schema(self, client, tracking_service, applicant):
        response = client.post(
            "/api/v1/applications",
            json={"job_id": str(uuid4()), "email": "a@b.co", "years_of_experience": -1},
            headers=_auth(applicant),
        )

        assert response.status_code == 422

    def test_duplicate_is_conflict(self, client, tracking_service, applicant):
        job_id = uuid4()
        tracking_service.submit_application.side_effect = DuplicateResourceException(
            "Application", "job_id", str(job_id)
        )

        response = client.post(
            "/api/v1/applications",
            json={"job_id": str(job_id), "email": "a@b.co"},
            headers=_auth(applicant),
        )

        assert response.status_code == 409


class TestRankedEndpoint:
    """GET /api/v1/applications/job/{job_id}/ranked"""

    def test_ranked_candidates(self, client, tracking_service, employer, make_application):
        job_id = uuid4()
        tracking_service.rank_applications.return_value = [
            make_application(score=90, job_id=job_id),
            make_application(score=None, job_id=job_id),
        ]

        response = client.get(
            f"/api/v1/applications/job/{job_id}/ranked",
            params={"min_score": 60},
            headers=_auth(employer),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert body["min_score"] == 60
        assert body["limit"] == 50
        assert [c["match_score"] for c in body["candidates"]] == [90, None]
        assert body["candidates"][1]["score_tier"]["tier"] == "unscored"
        assert tracking_service.rank_applications.call_args.kwargs == {"min_score": 60, "limit": 50}

    @pytest.mark.parametrize("params", [{"min_score": 101}, {"min_score": -1}, {"limit": 0}])
    def test_invalid_query(self, client, tracking_service, employer, params):
        response = client.get(
            f"/api/v1/applications/job/{uuid4()}/ranked",
            params=params,
            headers=_auth(employer),
        )

        assert response.status_code == 422
        tracking_service.rank_applications.assert_not_awaited()

    def test_applicant_forbidden(self, client, tracking_service, applicant):
        response = client.get(f"/api/v1/applications/job/{uuid4()}/ranked", headers=_auth(applicant))

        assert response.status_code == 403

    def test_unknown_job(self, client, tracking_service, employer):
        job_id = uuid4()
        tracking_service.rank_applications.side_effect = ResourceNotFoundException("JobPosting", str(job_id))

        response = client.get(f"/api/v1/applications/job/{job_id}/ranked", headers=_auth(employer))

        assert response.status_code == 404


class TestStatusEndpoint:
    """PATCH /api/v1/applications/{application_id}/status"""

    def test_illegal_transition_is_conflict(self, client, tracking_service, employer):
        tracking_service.update_status.side_effect = InvalidStateTransitionException(
            "Application", "hired", "pending"
        )

        response = client.patch(
            f"/api/v1/applications/{uuid4()}/status",
            json={"status": "pending"},
            headers=_auth(employer),
        )

        assert response.status_code == 409

    def test_unknown_status_value(self, client, tracking_service, employer):
        response = client.patch(
            f"/api/v1/applications/{uuid4()}/status",
            json={"status": "archived"},
            headers=_auth(employer),
        )

        assert response.status_code == 422

    def test_status_updated(self, client, tracking_service, employer, make_application):
        application = make_application(score=70, status=ApplicationStatus.REVIEWING)
        tracking_service.update_status.return_value = application

        response = client.patch(
            f"/api/v1/applications/{application.id}/status",
            json={"status": "reviewing"},
            headers=_auth(employer),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "reviewing"


class TestJobEndpoints:
    """Public job board"""

    def test_list_jobs_pagination(self, client, job_service, make_job):
        job_service.list_approved_jobs.return_value = ([make_job()], 41)

        response = client.get("/api/v1/jobs", params={"page": 2, "limit": 20})

        assert response.status_code == 200
        assert response.json()["pagination"] == {"page": 2, "limit": 20, "total": 41, "pages": 3}

    def test_create_job_requires_employer(self, client, job_service, applicant):
        response = client.post(
            "/api/v1/jobs",
            json={"title": "Dev", "description": "Code", "location": "Remote"},
            headers=_auth(applicant),
        )

        assert response.status_code == 403

    def test_pending_queue_admin_only(self, client, job_service, employer, admin):
        job_service.list_pending_jobs.return_value = []

        assert client.get("/api/v1/admin/jobs/pending", headers=_auth(employer)).status_code == 403
        assert client.get("/api/v1/admin/jobs/pending", headers=_auth(admin)).status_code == 200


class TestPartnerEndpoints:
    """Partner directory and signups"""

    _signup = {
        "company_name": "Talent Bridge",
        "email": "hello@talentbridge.example",
        "phone": "+1 555 0100",
        "specialty": "Software Engineering",
        "description": "Technical recruiting for startups.",
    }

    def test_directory_is_public(self, client, partner_service, make_partner):
        partner_service.list_approved_partners.return_value = (
            [make_partner(status=PartnerStatus.APPROVED, is_featured=True)], 25
        )

        response = client.get("/api/v1/partners", params={"specialty": "Engineering"})

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"page": 1, "limit": 12, "total": 25, "pages": 3}
        assert body["partners"][0]["is_featured"] is True
        assert partner_service.list_approved_partners.call_args.kwargs["specialty"] == "Engineering"

    def test_signup_created_pending(self, client, partner_service, employer, make_partner):
        partner_service.submit_partner.return_value = make_partner(submitted_by=employer.user_id)

        response = client.post("/api/v1/partners", json=self._signup, headers=_auth(employer))

        assert response.status_code == 201
        assert response.json()["status"] == "pending"
        signup = partner_service.submit_partner.call_args.args[1]
        assert signup.company_name == "Talent Bridge"

    def test_signup_requires_employer(self, client, partner_service, applicant):
        response = client.post("/api/v1/partners", json=self._signup, headers=_auth(applicant))

        assert response.status_code == 403
        partner_service.submit_partner.assert_not_awaited()

    def test_duplicate_email_is_conflict(self, client, partner_service, employer):
        partner_service.submit_partner.side_effect = DuplicateResourceException(
            "RecruitmentPartner", "email", self._signup["email"]
        )

        response = client.post("/api/v1/partners", json=self._signup, headers=_auth(employer))

        assert response.status_code == 409

    def test_unknown_partner(self, client, partner_service):
        partner_id = uuid4()
        partner_service.get_approved_partner.side_effect = ResourceNotFoundException(
            "RecruitmentPartner", str(partner_id)
        )

        response = client.get(f"/api/v1/partners/{partner_id}")

        assert response.status_code == 404


class TestAdminPartnerEndpoints:
    """Partner moderation queue"""

    def test_pending_queue_admin_only(self, client, partner_service, employer, admin, make_partner):
        partner_service.list_pending_partners.return_value = [make_partner()]

        assert client.get("/api/v1/admin/partners/pending", headers=_auth(employer)).status_code == 403

        response = client.get("/api/v1/admin/partners/pending", headers=_auth(admin))
        assert response.status_code == 200
        assert [p["status"] for p in response.json()] == ["pending"]

    def test_approve_with_featuring(self, client, partner_service, admin, make_partner):
        partner = make_partner(status=PartnerStatus.APPROVED, is_featured=True)
        partner_service.review_partner.return_value = partner

        response = client.put(
            f"/api/v1/admin/partners/{partner.id}/status",
            json={"status": "approved", "featured_months": 6},
            headers=_auth(admin),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        call = partner_service.review_partner.call_args
        assert call.args[2] == PartnerStatus.APPROVED
        assert call.kwargs == {"rejection_reason": None, "featured_months": 6}

    @pytest.mark.parametrize("payload", [
        {"status": "archived"},
        {"status": "approved", "featured_months": 0},
        {"status": "approved", "featured_months": 25},
    ])
    def test_invalid_review(self, client, partner_service, admin, payload):
        response = client.put(
            f"/api/v1/admin/partners/{uuid4()}/status",
            json=payload,
            headers=_auth(admin),
        )

        assert response.status_code == 422
        partner_service.review_partner.assert_not_awaited()
