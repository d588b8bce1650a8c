"""
Root conftest.py - Sets environment variables before any module imports.

The application settings are cached on first use, so the test database URL
must be in place before anything imports sportclub.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FORMAT"] = "text"
os.environ["DEBUG"] = "false"

import itertools
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from sportclub.modules.membership.domain.models.member import Gender, Member
from sportclub.modules.membership.domain.repositories.member_repository import MemberRepository
from sportclub.shared.config.settings import get_settings
from sportclub.shared.infrastructure.cache.memory_cache import reset_sports_cache
from sportclub.shared.infrastructure.database.connection import close_database, init_database
from sportclub.shared.infrastructure.database.session import initialize_sessions, session_manager

get_settings.cache_clear()


# ============================================
# In-memory member store
# ============================================

class InMemoryMemberRepository(MemberRepository):
    """
    Dict-backed MemberRepository for domain tests.

    Counts projected reads so tests can check how many store calls a
    chain walk makes.
    """

    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)
        self.field_reads = 0
        self.writes: List[tuple] = []

    @staticmethod
    def _plain(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v.value if isinstance(v, Enum) else v for k, v in fields.items()}

    def _to_member(self, row: Dict[str, Any]) -> Member:
        return Member(**row)

    def seed(self, member_id: int, family_head_id: Optional[int] = None, **fields) -> Member:
        """Insert a row directly, bypassing every check."""
        row = {
            "id": member_id,
            "first_name": fields.get("first_name", f"First{member_id}"),
            "last_name": fields.get("last_name", f"Last{member_id}"),
            "gender": fields.get("gender", "male"),
            "birthdate": fields.get("birthdate", date(1990, 1, 1)),
            "subscription_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "family_head_id": family_head_id,
        }
        self.rows[member_id] = row
        self._ids = itertools.count(max(self.rows) + 1)
        return self._to_member(row)

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        row = self.rows.get(member_id)
        return self._to_member(row) if row else None

    async def get_fields(self, member_id: int, fields: Sequence[str]) -> Optional[Dict[str, Any]]:
        self.field_reads += 1
        row = self.rows.get(member_id)
        if row is None:
            return None
        return {name: row[name] for name in fields}

    async def find_by_field(self, field_name: str, value: Any) -> List[Member]:
        if isinstance(value, Enum):
            value = value.value
        return [
            self._to_member(row)
            for _, row in sorted(self.rows.items())
            if row.get(field_name) == value
        ]

    async def create(self, fields: Dict[str, Any]) -> Member:
        member_id = next(self._ids)
        row = {
            "id": member_id,
            "subscription_date": datetime.now(timezone.utc),
            "family_head_id": None,
            **self._plain(fields),
        }
        row["id"] = member_id
        self.rows[member_id] = row
        self.writes.append(("create", member_id))
        return self._to_member(row)

    async def update_fields(self, member_id: int, fields: Dict[str, Any]) -> None:
        if member_id in self.rows:
            self.rows[member_id].update(self._plain(fields))
            self.writes.append(("update", member_id, dict(fields)))

    async def delete(self, member_id: int) -> None:
        self.rows.pop(member_id, None)
        self.writes.append(("delete", member_id))


def member_payload(**overrides) -> Dict[str, Any]:
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "gender": Gender.FEMALE,
        "birthdate": date(1990, 12, 10),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def member_repository() -> InMemoryMemberRepository:
    return InMemoryMemberRepository()


# ============================================
# Database and HTTP client
# ============================================

@pytest.fixture(autouse=True)
def fresh_sports_cache():
    reset_sports_cache()
    yield
    reset_sports_cache()


@pytest.fixture
async def database():
    """
    Fresh in-memory SQLite database with every table created.

    Uses the same connection and session managers as the running
    application, so requests commit and roll back exactly as in production.
    """
    await init_database(create_tables=True)
    initialize_sessions()
    try:
        yield session_manager
    finally:
        session_manager.reset()
        await close_database()


@pytest.fixture
async def db_session(database):
    """A session for repository tests, rolled back afterwards."""
    async with database._session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def async_client(database):
    """
    Async HTTP client for testing FastAPI endpoints.

    ASGITransport does not run the lifespan; the ``database`` fixture
    stands in for it.
    """
    from sportclub.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def create_member(client: AsyncClient, **overrides) -> Dict[str, Any]:
    body = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "gender": "female",
        "birthdate": "1990-12-10",
    }
    body.update(overrides)
    response = await client.post("/api/v1/members", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def create_sport(client: AsyncClient, **overrides) -> Dict[str, Any]:
    body = {"name": "Tennis", "subscriptionPrice": 49.99, "allowedGender": "mix"}
    body.update(overrides)
    response = await client.post("/api/v1/sports", json=body)
    assert response.status_code == 201, response.text
    return response.json()
