# 📄 File: sportclub/modules/sports/__init__.py
# 🧭 Purpose (Layman Explanation):
# The sport catalog of the club: which sports exist, what they cost and who may join them.
# 🧪 Purpose (Technical Summary):
# Sports module package (domain, infrastructure, presentation layers) owning the sports table
# and the cached catalog listing.
# 🔗 Dependencies:
# - sportclub.shared
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router
# - sportclub.modules.subscriptions (sport lookups)

__all__ = []
