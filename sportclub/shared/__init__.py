# 📄 File: sportclub/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the sport club
# backend can use, like the database connection and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure and cross-cutting
# concerns used by the membership, sports and subscriptions modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database session handling and the in-process cache
- Domain exceptions and base API schemas
- Validators and structured logging
"""

__all__ = []
