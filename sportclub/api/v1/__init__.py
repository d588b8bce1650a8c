# 📄 File: sportclub/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the club API, kept in its own section so later versions can be added without
# breaking existing clients.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with route prefixes, OpenAPI tags and version metadata.
# 🔗 Dependencies:
# sportclub.shared.config.settings
# 🔄 Connected Modules / Calls From:
# sportclub.api.v1.router

"""
Sport Club API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers live in sportclub/modules/<module>/presentation/api/v1/.
"""

from typing import Any, Dict

from sportclub.shared.config.settings import get_settings

# API v1 metadata
__api_version__ = "v1"
__status__ = "stable"

ROUTE_PREFIXES = {
    "members": "/members",
    "sports": "/sports",
}

API_TAGS = {
    "health": "Health Check",
    "members": "Members",
    "subscriptions": "Subscriptions",
    "sports": "Sports",
}


def get_api_info() -> Dict[str, Any]:
    """API v1 version information and route prefixes."""
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": __api_version__,
        "status": __status__,
        "routes": {name: f"/api/v1{prefix}" for name, prefix in ROUTE_PREFIXES.items()},
    }


__all__ = ["ROUTE_PREFIXES", "API_TAGS", "get_api_info"]
