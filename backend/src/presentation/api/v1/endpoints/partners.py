"""
Recruitment Partner Endpoints
Public partner directory and employer signups
"""
import math
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from core.config import settings
from domain.enums import UserRole
from domain.value_objects import CallerIdentity
from application.services.recruitment_partners import IRecruitmentPartnerService
from presentation.api.v1.container import get_recruitment_partner_service
from presentation.api.v1.dependencies import require_roles, limiter
from presentation.api.v1.schemas.job import Pagination
from presentation.api.v1.schemas.partner import (
    PartnerCreateRequest,
    PartnerListResponse,
    PartnerResponse,
)


router = APIRouter()


@router.get("/partners", response_model=PartnerListResponse)
async def list_partners(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.PARTNERS_PAGE_SIZE, ge=1, le=settings.PARTNERS_MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, description="Matches name, specialty or description"),
    specialty: Optional[str] = Query(None),
    service: IRecruitmentPartnerService = Depends(get_recruitment_partner_service)
):
    """Approved partners, featured first"""
    partners, total = await service.list_approved_partners(
        page=page,
        limit=limit,
        search=search,
        specialty=specialty,
    )
    return PartnerListResponse(
        partners=[PartnerResponse.from_entity(p) for p in partners],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if total else 0,
        ),
    )


@router.get("/partners/{partner_id}", response_model=PartnerResponse)
async def get_partner(
    partner_id: UUID,
    service: IRecruitmentPartnerService = Depends(get_recruitment_partner_service)
):
    """Single approved partner"""
    partner = await service.get_approved_partner(partner_id)
    return PartnerResponse.from_entity(partner)


@router.post("/partners", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def submit_partner(
    request: Request,
    payload: PartnerCreateRequest,
    caller: CallerIdentity = Depends(require_roles(UserRole.EMPLOYER)),
    service: IRecruitmentPartnerService = Depends(get_recruitment_partner_service)
):
    """Register an agency; it stays pending until an admin approves it"""
    partner = await service.submit_partner(caller, payload.to_signup())
    return PartnerResponse.from_entity(partner)
