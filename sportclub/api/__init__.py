# 📄 File: sportclub/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package holding everything that faces the web: versions of the API
# and the helpers that wrap every request.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers and HTTP middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# sportclub.main

"""
Sport Club API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Error handling and request logging
    └── v1/                  # API version 1
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"

__all__ = ["API_PREFIX", "CURRENT_VERSION"]
