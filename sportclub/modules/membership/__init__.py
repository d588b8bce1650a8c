# 📄 File: sportclub/modules/membership/__init__.py
# 🧭 Purpose (Layman Explanation):
# The membership area of the club: people, their personal details and who their family head is.
# 🧪 Purpose (Technical Summary):
# Membership module package (domain, infrastructure, presentation layers) owning the members
# table and the family-hierarchy forest built on it.
# 🔗 Dependencies:
# - sportclub.shared
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router
# - sportclub.modules.subscriptions (member existence checks)

"""
Membership Module

- Member domain model and family-hierarchy rules
- Member repository (SQLAlchemy async)
- /members REST endpoints
"""

__all__ = []
