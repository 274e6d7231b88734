"""
Job Posting Endpoints
Public job board and employer posting management
"""
import math
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from core.config import settings
from domain.enums import UserRole
from domain.value_objects import CallerIdentity
from application.services.job_postings import IJobPostingService
from presentation.api.v1.container import get_job_posting_service
from presentation.api.v1.dependencies import get_current_caller, require_roles
from presentation.api.v1.schemas.job import (
    JobCreateRequest,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
    Pagination,
)


router = APIRouter()


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.JOBS_PAGE_SIZE, ge=1, le=settings.JOBS_MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, description="Matches title or description"),
    location: Optional[str] = Query(None),
    remote: bool = Query(False, description="Only remote-friendly postings"),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Approved postings, newest first"""
    jobs, total = await service.list_approved_jobs(
        page=page,
        limit=limit,
        search=search,
        location=location,
        remote_only=remote,
    )
    return JobListResponse(
        jobs=[JobResponse.from_entity(j) for j in jobs],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if total else 0,
        ),
    )


@router.get("/jobs/employer/mine", response_model=list[JobResponse])
async def list_my_jobs(
    caller: CallerIdentity = Depends(require_roles(UserRole.EMPLOYER)),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """The employer's own postings in any status"""
    jobs = await service.list_company_jobs(caller)
    return [JobResponse.from_entity(j) for j in jobs]


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: UUID,
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Single approved posting"""
    job = await service.get_approved_job(job_id)
    return JobResponse.from_entity(job)


@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobCreateRequest,
    caller: CallerIdentity = Depends(require_roles(UserRole.EMPLOYER)),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Create a posting; it stays pending until an admin approves it"""
    job = await service.create_job(caller, payload.to_draft())
    return JobResponse.from_entity(job)


@router.put("/jobs/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    payload: JobUpdateRequest,
    caller: CallerIdentity = Depends(get_current_caller),
    service: IJobPostingService = Depends(get_job_posting_service)
):
    """Edit a posting (owner or admin). Existing applications keep their scores."""
    job = await service.update_job(caller, job_id, payload.to_changes())
    return JobResponse.from_entity(job)
