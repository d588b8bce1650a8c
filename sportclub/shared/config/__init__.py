# 📄 File: sportclub/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains all the settings that tell the sport club backend how to connect
# to its database and adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - sportclub.main (application startup)
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database engine configuration and the declarative base
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
