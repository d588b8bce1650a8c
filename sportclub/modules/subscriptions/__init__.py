# 📄 File: sportclub/modules/subscriptions/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps track of which member plays which sport, and whether they train in a group or privately.
# 🧪 Purpose (Technical Summary):
# Subscriptions module package linking members and sports, enforcing pair uniqueness and the
# gender eligibility rule.
# 🔗 Dependencies:
# - sportclub.modules.membership, sportclub.modules.sports
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router (/members/{id}/subscribe, unsubscribe, subscriptions)

__all__ = []
