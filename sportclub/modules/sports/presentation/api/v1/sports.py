# 📄 File: sportclub/modules/sports/presentation/api/v1/sports.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for the sport catalog: add a sport, list them, look one up, change or remove it.
#
# 🧪 Purpose (Technical Summary):
# FastAPI sport catalog endpoints delegating to SportService.
#
# 🔗 Dependencies:
# - FastAPI router
# - sport schemas and dependencies
#
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router (router inclusion under /sports)

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status

from sportclub.modules.sports.domain.services.sport_service import SportService
from sportclub.modules.sports.presentation.api.schemas.sport_schemas import (
    SportCreateRequest,
    SportResponse,
    SportUpdateRequest,
)
from sportclub.modules.sports.presentation.dependencies import get_sport_service

logger = logging.getLogger(__name__)

sports_router = APIRouter()


@sports_router.post(
    "",
    response_model=SportResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create sport",
    responses={409: {"description": "Sport name already exists"}}
)
async def create_sport(
    payload: SportCreateRequest,
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    sport = await sport_service.create(payload.model_dump())
    return SportResponse.from_domain(sport)


@sports_router.get(
    "",
    response_model=List[SportResponse],
    summary="List sports",
    description="All sports ordered by name"
)
async def list_sports(
    sport_service: SportService = Depends(get_sport_service),
) -> List[SportResponse]:
    sports = await sport_service.find_all()
    return [SportResponse.from_domain(sport) for sport in sports]


@sports_router.get(
    "/{sport_id}",
    response_model=SportResponse,
    summary="Get sport",
    responses={404: {"description": "Sport not found"}}
)
async def get_sport(
    sport_id: int = Path(..., gt=0),
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    sport = await sport_service.find_one(sport_id)
    return SportResponse.from_domain(sport)


@sports_router.patch(
    "/{sport_id}",
    response_model=SportResponse,
    summary="Update sport",
    responses={
        404: {"description": "Sport not found"},
        409: {"description": "Sport name already exists"},
    }
)
async def update_sport(
    payload: SportUpdateRequest,
    sport_id: int = Path(..., gt=0),
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    sport = await sport_service.update(sport_id, payload.to_changes())
    return SportResponse.from_domain(sport)


@sports_router.delete(
    "/{sport_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove sport",
    responses={404: {"description": "Sport not found"}}
)
async def remove_sport(
    sport_id: int = Path(..., gt=0),
    sport_service: SportService = Depends(get_sport_service),
) -> None:
    """Remove a sport and, with it, every subscription to it."""
    await sport_service.remove(sport_id)
