# 📄 File: sportclub/modules/membership/presentation/api/v1/members.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for managing club members: register a member, look one up with their family,
# change their details or family head, remove them, and see what a removal would change.
#
# 🧪 Purpose (Technical Summary):
# FastAPI member endpoints delegating to MemberService. Domain errors propagate to the
# application exception handler, which renders the JSON error envelope.
#
# 🔗 Dependencies:
# - FastAPI router, Path parameters, status codes
# - sportclub.modules.membership.presentation.api.schemas.member_schemas
# - sportclub.modules.membership.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router (router inclusion under /members)

"""
Members API Endpoints

Endpoints:
- POST /: Create a member
- GET /{member_id}: Member with family head and family members
- PATCH /{member_id}: Partial update (family head changes are cycle-checked)
- DELETE /{member_id}: Remove a member, dependents move to its family head
- GET /{member_id}/hierarchy: Ancestor chain up to the family root
- GET /{member_id}/removal-preview: What a removal would change
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from sportclub.modules.membership.domain.services.member_service import MemberService
from sportclub.modules.membership.presentation.api.schemas.member_schemas import (
    MemberCreateRequest,
    MemberDetailResponse,
    MemberHierarchyResponse,
    MemberRemovalResponse,
    MemberResponse,
    MemberUpdateRequest,
    RemovalPreviewResponse,
)
from sportclub.modules.membership.presentation.dependencies import get_member_service

logger = logging.getLogger(__name__)

members_router = APIRouter()

_ERRORS = {
    404: {"description": "Member not found"},
    503: {"description": "Database unavailable"},
}


@members_router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create member",
    responses={
        400: {"description": "Family head not found"},
        503: {"description": "Database unavailable"},
    }
)
async def create_member(
    payload: MemberCreateRequest,
    member_service: MemberService = Depends(get_member_service),
) -> MemberResponse:
    """
    Register a new member, optionally under an existing family head.
    """
    member = await member_service.create(payload.model_dump())
    return MemberResponse.from_domain(member)


@members_router.get(
    "/{member_id}",
    response_model=MemberDetailResponse,
    summary="Get member",
    responses=_ERRORS
)
async def get_member(
    member_id: int = Path(..., gt=0),
    member_service: MemberService = Depends(get_member_service),
) -> MemberDetailResponse:
    details = await member_service.find_one(member_id)
    return MemberDetailResponse.from_details(details)


@members_router.patch(
    "/{member_id}",
    response_model=MemberDetailResponse,
    summary="Update member",
    responses={
        **_ERRORS,
        400: {"description": "Family head not found or circular family hierarchy"},
    }
)
async def update_member(
    payload: MemberUpdateRequest,
    member_id: int = Path(..., gt=0),
    member_service: MemberService = Depends(get_member_service),
) -> MemberDetailResponse:
    """
    Update member fields.

    A family head change is validated (existence and cycles) before the
    other fields are written; ``familyHeadId: null`` detaches the member.
    """
    details = await member_service.update(member_id, payload.to_changes())
    return MemberDetailResponse.from_details(details)


@members_router.delete(
    "/{member_id}",
    response_model=MemberRemovalResponse,
    summary="Remove member",
    responses=_ERRORS
)
async def remove_member(
    member_id: int = Path(..., gt=0),
    member_service: MemberService = Depends(get_member_service),
) -> MemberRemovalResponse:
    """
    Remove a member. Its dependents are reassigned to its own family head.
    """
    result = await member_service.remove(member_id)
    return MemberRemovalResponse.from_result(result)


@members_router.get(
    "/{member_id}/hierarchy",
    response_model=MemberHierarchyResponse,
    summary="Get family hierarchy",
    responses=_ERRORS
)
async def get_member_hierarchy(
    member_id: int = Path(..., gt=0),
    member_service: MemberService = Depends(get_member_service),
) -> MemberHierarchyResponse:
    family_chain = await member_service.get_hierarchy(member_id)
    return MemberHierarchyResponse.from_family_chain(family_chain)


@members_router.get(
    "/{member_id}/removal-preview",
    response_model=RemovalPreviewResponse,
    summary="Preview member removal",
    responses=_ERRORS
)
async def preview_member_removal(
    member_id: int = Path(..., gt=0),
    member_service: MemberService = Depends(get_member_service),
) -> RemovalPreviewResponse:
    """
    Show which dependents a removal would reassign, without changing anything.
    """
    preview = await member_service.get_removal_preview(member_id)
    return RemovalPreviewResponse.from_preview(preview)
