# 📄 File: sportclub/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the club API: sends member requests to the member
# handlers, sport requests to the sport handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and every module router under its
# route prefix, plus an API info endpoint.
# 🔗 Dependencies:
# FastAPI, sportclub.api.v1.health, sportclub.modules.*.presentation.api.v1.*
# 🔄 Connected Modules / Calls From:
# sportclub.main

import logging
from typing import Any, Dict

from fastapi import APIRouter

from sportclub.modules.membership.presentation.api.v1.members import members_router
from sportclub.modules.sports.presentation.api.v1.sports import sports_router
from sportclub.modules.subscriptions.presentation.api.v1.subscriptions import subscriptions_router

from . import API_TAGS, ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Health check routes (no prefix)
api_v1_router.include_router(health_router, tags=[API_TAGS["health"]])

api_v1_router.include_router(
    members_router,
    prefix=ROUTE_PREFIXES["members"],
    tags=[API_TAGS["members"]]
)
api_v1_router.include_router(
    subscriptions_router,
    prefix=ROUTE_PREFIXES["members"],
    tags=[API_TAGS["subscriptions"]]
)
api_v1_router.include_router(
    sports_router,
    prefix=ROUTE_PREFIXES["sports"],
    tags=[API_TAGS["sports"]]
)


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available endpoints",
                   tags=["API Info"])
async def api_v1_info() -> Dict[str, Any]:
    return {
        **get_api_info(),
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
        },
    }
