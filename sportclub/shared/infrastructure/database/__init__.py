"""
Database infrastructure: engine lifecycle, per-request sessions and the
guarded repository base class.
"""

from .connection import close_database, database_health_check, init_database
from .repository import SQLAlchemyRepository
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "close_database",
    "database_health_check",
    "init_database",
    "SQLAlchemyRepository",
    "get_db_session",
    "initialize_sessions",
    "session_manager",
]
