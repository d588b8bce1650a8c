# 📄 File: sportclub/modules/membership/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how members are stored in the database, including the link from each member
# to their family head.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the members table. The family forest is a nullable self-referencing
# foreign key; no ORM relationship objects are mapped, navigation is done by id lookups.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - sportclub.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - member_repository_impl.py (CRUD operations)
# - sportclub.modules.subscriptions.infrastructure.database.models (foreign key target)
# - Alembic migrations

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)

from sportclub.shared.config.database import DatabaseBase, UTCDateTime


# =============================================================================
# MEMBER MODEL
# =============================================================================

class MemberModel(DatabaseBase):
    """
    SQLAlchemy model for club members.

    ``family_head_id`` points at another row of the same table. Deleting the
    head at the database level nulls the pointer; the application reassigns
    dependents before deleting, so the SET NULL rule only guards raw SQL.
    """
    __tablename__ = "members"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned member identifier"
    )

    first_name = Column(
        String(100),
        nullable=False,
        comment="Member's first name"
    )
    last_name = Column(
        String(100),
        nullable=False,
        comment="Member's last name"
    )
    gender = Column(
        String(10),
        nullable=False,
        comment="male or female"
    )
    birthdate = Column(
        Date,
        nullable=False,
        comment="Date of birth"
    )

    subscription_date = Column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        comment="Membership creation timestamp, immutable"
    )

    family_head_id = Column(
        Integer,
        ForeignKey("members.id", ondelete="SET NULL"),
        nullable=True,
        comment="Family head member (parent in the family forest)"
    )

    __table_args__ = (
        CheckConstraint("gender IN ('male', 'female')", name="gender_valid"),
        CheckConstraint("family_head_id IS NULL OR family_head_id <> id", name="no_self_family_head"),
        Index("ix_members_family_head_id", "family_head_id"),
    )

    def __repr__(self) -> str:
        return f"<MemberModel(id={self.id}, name='{self.first_name} {self.last_name}')>"
