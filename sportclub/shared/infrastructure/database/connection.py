# 📄 File: sportclub/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the club database, making sure we can talk to our data storage
# and handling multiple connections efficiently without overwhelming the database.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine lifecycle management with connection pooling, health checks
# and retry logic for robust database connectivity across all modules.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - sportclub/shared/config/database.py (engine configuration)
# - asyncpg / aiosqlite (async drivers)
#
# 🔄 Connected Modules / Calls From:
# - sportclub/shared/infrastructure/database/session.py (session management)
# - sportclub/main.py (startup and shutdown)
# - sportclub/api/v1/health.py (readiness probe)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sportclub.shared.config.database import DatabaseBase, DatabaseConfig, enable_sqlite_foreign_keys
from sportclub.shared.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self._config = config
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    @property
    def config(self) -> DatabaseConfig:
        if self._config is None:
            self._config = DatabaseConfig()
        return self._config

    async def initialize(self, create_tables: bool = False) -> None:
        """
        Initialize database engine with connection pooling.

        Args:
            create_tables: Create all tables from model metadata (SQLite/dev only;
                PostgreSQL schemas are managed by Alembic migrations)
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(
            self.config.database_url,
            **self.config.engine_kwargs
        )
        if self.config.settings.is_sqlite:
            enable_sqlite_foreign_keys(self._engine.sync_engine)

        health = await self.health_check()
        if health["status"] != "healthy":
            await self.close()
            raise StoreUnavailableError(
                "Database unreachable during startup",
                operation="initialize"
            )

        if create_tables:
            await self.create_tables()

        logger.info("Database connection pool initialized successfully")

    async def create_tables(self) -> None:
        """Create every table registered on the declarative base."""
        # Registers the model classes on DatabaseBase.metadata
        from sportclub.modules import register_models

        register_models()
        async with self.engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables created")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except (SQLAlchemyError, OSError) as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(create_tables: bool = False) -> None:
    """Initialize the global database connection manager."""
    try:
        logger.info("Starting database initialization...")
        await db_manager.initialize(create_tables=create_tables)
        logger.info("Database initialization completed successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {str(e)}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """
    Perform database health check.

    Returns:
        dict: status payload with "status" of "healthy" or "unhealthy"
    """
    return await db_manager.health_check()
