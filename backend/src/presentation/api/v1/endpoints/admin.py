"""
Admin Endpoints
Job posting and recruitment partner moderation queues
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from domain.enums import UserRole
from domain.value_objects import CallerIdentity
from application.services.job_postings import IJobPostingService
from application.services.recruitment_partners import IRecruitmentPartnerService
from presentation.api.v1.container import get_job_posting_service, get_recruitment_partner_service
from presentation.api.v1.dependencies import require_roles
from presentation.api.v1.schemas.job import JobResponse, JobReviewRequest
from presentation.api.v1.schemas.partner import PartnerResponse, PartnerReviewRequest


router = APIRouter()

_admin = require_roles(UserRole.ADMIN)


@router.get("/jobs/pending", response_model=List[JobResponse])
async def list_pending_jobs(
    caller: CallerIdentity = Depends(_admin),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Postings awaiting approval, oldest first"""
    jobs = await service.list_pending_jobs(caller)
    return [JobResponse.from_entity(j) for j in jobs]


@router.put("/jobs/{job_id}/status", response_model=JobResponse)
async def review_job(
    job_id: UUID,
    payload: JobReviewRequest,
    caller: CallerIdentity = Depends(_admin),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Approve or reject a posting"""
    job = await service.review_job(caller, job_id, payload.status, payload.rejection_reason)
    return JobResponse.from_entity(job)


@router.get("/partners/pending", response_model=List[PartnerResponse])
async def list_pending_partners(
    caller: CallerIdentity = Depends(_admin),
    service: IRecruitmentPartnerService = Depends(get_recruitment_partner_service)
):
    """Partner signups awaiting approval, oldest first"""
    partners = await service.list_pending_partners(caller)
    return [PartnerResponse.from_entity(p) for p in partners]


@router.put("/partners/{partner_id}/status", response_model=PartnerResponse)
async def review_partner(
    partner_id: UUID,
    payload: PartnerReviewRequest,
    caller: CallerIdentity = Depends(_admin),
    service: IRecruitmentPartnerService = Depends(get_recruitment_partner_service)
):
    """Approve, reject or suspend a partner"""
    partner = await service.review_partner(
        caller,
        partner_id,
        payload.status,
        rejection_reason=payload.rejection_reason,
        featured_months=payload.featured_months,
    )
    return PartnerResponse.from_entity(partner)
