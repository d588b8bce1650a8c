# 📄 File: sportclub/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that this folder holds the sport club backend and records its name and version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata for the Sport Club
# membership API.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (version metadata)

"""
Sport Club Application - Membership Management Backend

A backend API for managing club members and their family hierarchy,
the sport catalog and member subscriptions to sports.
"""

__version__ = "1.0.0"
__title__ = "Sport Club Backend API"
__description__ = "Membership, family hierarchy and sport subscription management"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
