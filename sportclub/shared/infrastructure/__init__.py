"""
Infrastructure layer package for the Sport Club application.
Provides the database connection, session handling, the repository base
class and the in-process cache.
"""

__all__ = []
