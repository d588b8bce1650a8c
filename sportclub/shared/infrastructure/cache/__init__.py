# 📄 File: sportclub/shared/infrastructure/cache/__init__.py
# 🧭 Purpose (Layman Explanation):
# Short-term memory for data that is read often and changes rarely, like the list of sports.
# 🧪 Purpose (Technical Summary):
# Cache package exporting the process-local TTL cache and the sports cache accessor.
# 🔗 Dependencies:
# - memory_cache.py
# 🔄 Connected Modules / Calls From:
# - sportclub.modules.sports (catalog listing)

from .memory_cache import InMemoryCache, get_sports_cache, reset_sports_cache

__all__ = ["InMemoryCache", "get_sports_cache", "reset_sports_cache"]
