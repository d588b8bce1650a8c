# 📄 File: sportclub/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the club database, managing connections efficiently,
# and giving every table the same naming rules.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async engine configuration with connection pooling and environment-specific
# settings, plus the declarative base and constraint naming convention shared by all models.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine
# - sportclub.shared.config.settings
# - PostgreSQL driver (asyncpg) or SQLite driver (aiosqlite)
#
# 🔄 Connected Modules / Calls From:
# - sportclub.shared.infrastructure.database.connection
# - All infrastructure/database/models.py modules
# - migrations/env.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, MetaData, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool, StaticPool
from sqlalchemy.types import TypeDecorator

from .settings import Settings, get_settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self.settings.database_url

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on environment and dialect."""

        base_config: Dict[str, Any] = {
            "echo": self.settings.DEBUG and self.settings.is_development,
        }

        if self.settings.is_sqlite:
            # In-memory SQLite must share one connection across the whole process
            base_config.update({
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            })
            return base_config

        base_config["connect_args"] = {
            "server_settings": {
                "application_name": f"sportclub_{self.settings.ENVIRONMENT}",
                "jit": "off",  # Disable JIT for better connection times
            },
            "command_timeout": self.settings.DB_COMMAND_TIMEOUT,
        }

        if self.settings.is_testing:
            base_config["poolclass"] = NullPool
        else:
            base_config.update({
                "pool_size": self.settings.DB_POOL_SIZE,
                "max_overflow": self.settings.DB_MAX_OVERFLOW,
                "pool_timeout": self.settings.DB_POOL_TIMEOUT,
                "pool_recycle": self.settings.DB_POOL_RECYCLE,
                "pool_pre_ping": True,  # Verify connections before use
            })

            if self.settings.is_production:
                base_config["connect_args"]["server_settings"].update({
                    "timezone": "UTC",
                    "idle_in_transaction_session_timeout": "300000",
                })

        return base_config


# =============================================================================
# COLUMN TYPES
# =============================================================================

class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always comes back in UTC.

    SQLite keeps DateTime values without an offset, so rows read back
    naive; PostgreSQL returns them aware. Both are normalised to UTC here.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    @staticmethod
    def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_bind_param(self, value, dialect):
        return self._as_utc(value)

    def process_result_value(self, value, dialect):
        return self._as_utc(value)


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides common metadata configuration for every table
    in the sport club application.
    """
    metadata = metadata


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """
    Turn on foreign key enforcement for every SQLite connection.

    SQLite ignores ON DELETE rules unless the pragma is set per connection.
    """

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
