"""
Application Endpoints
Submission, withdrawal and employer review of job applications
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from loguru import logger

from core.config import settings
from domain.enums import UserRole
from domain.value_objects import CallerIdentity
from application.services.application_tracking import IApplicationTrackingService
from presentation.api.v1.container import get_application_tracking_service
from presentation.api.v1.dependencies import get_current_caller, require_roles, limiter
from presentation.api.v1.schemas.application import (
    ApplicationCreateRequest,
    ApplicationListResponse,
    ApplicationResponse,
    MessageResponse,
    RankedApplicationsResponse,
    StatusUpdateRequest,
)


router = APIRouter()

_reviewer = require_roles(UserRole.EMPLOYER, UserRole.ADMIN)


@router.post(
    "/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED
)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def submit_application(
    request: Request,
    payload: ApplicationCreateRequest,
    caller: CallerIdentity = Depends(require_roles(UserRole.APPLICANT)),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Submit an application; the match score is computed on creation"""
    application = await service.submit_application(caller, payload.to_submission())
    return ApplicationResponse.from_entity(application)


@router.get("/applications/me", response_model=ApplicationListResponse)
async def get_my_applications(
    caller: CallerIdentity = Depends(require_roles(UserRole.APPLICANT)),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Applications submitted by the current applicant, newest first"""
    applications = await service.get_my_applications(caller)
    return ApplicationListResponse(
        applications=[ApplicationResponse.from_entity(a) for a in applications],
        count=len(applications),
    )


@router.get("/applications/job/{job_id}/ranked", response_model=RankedApplicationsResponse)
async def get_ranked_applications(
    job_id: UUID,
    min_score: int = Query(0, ge=0, le=100, description="Drop scored applications below this"),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=settings.RANKED_RESULTS_MAX_LIMIT,
        description="Maximum candidates returned"
    ),
    caller: CallerIdentity = Depends(_reviewer),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """
    Ranked candidates for a job.

    Ordered by match score (unscored last) then most recent submission.
    Unscored applications are kept whatever min_score is.
    """
    limit = limit or settings.RANKED_RESULTS_DEFAULT_LIMIT
    ranked = await service.rank_applications(caller, job_id, min_score=min_score, limit=limit)
    return RankedApplicationsResponse(
        job_id=job_id,
        candidates=[ApplicationResponse.from_entity(a) for a in ranked],
        count=len(ranked),
        min_score=min_score,
        limit=limit,
    )


@router.get("/applications/job/{job_id}", response_model=ApplicationListResponse)
async def get_job_applications(
    job_id: UUID,
    caller: CallerIdentity = Depends(_reviewer),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """All applications for a job in review order"""
    applications = await service.list_job_applications(caller, job_id)
    return ApplicationListResponse(
        applications=[ApplicationResponse.from_entity(a) for a in applications],
        count=len(applications),
    )


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: UUID,
    caller: CallerIdentity = Depends(get_current_caller),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Single application for its owner, the job's employer or an admin"""
    application = await service.get_application(caller, application_id)
    return ApplicationResponse.from_entity(application)


@router.delete("/applications/{application_id}", response_model=MessageResponse)
async def withdraw_application(
    application_id: UUID,
    caller: CallerIdentity = Depends(require_roles(UserRole.APPLICANT)),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Withdraw an application that is still pending or under review"""
    await service.withdraw_application(caller, application_id)
    return MessageResponse(message="Application withdrawn successfully")


@router.patch("/applications/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: UUID,
    payload: StatusUpdateRequest,
    caller: CallerIdentity = Depends(_reviewer),
    service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Move an application through pending > reviewing > shortlisted > hired, or reject it"""
    application = await service.update_status(caller, application_id, payload.status)
    logger.info(f"Status of application {application_id} is now {application.status.value}")
    return ApplicationResponse.from_entity(application)
