# 📄 File: sportclub/modules/subscriptions/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how sport enrolments are stored: which member, which sport, what kind and since when.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the sport_subscriptions join table with a unique (member_id, sport_id)
# constraint and cascading deletes from both members and sports.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - sportclub.shared.config.database (DatabaseBase)
# - members and sports tables (foreign keys)
#
# 🔄 Connected Modules / Calls From:
# - subscription_repository_impl.py
# - Alembic migrations

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)

from sportclub.shared.config.database import DatabaseBase, UTCDateTime


class SportSubscriptionModel(DatabaseBase):
    """
    SQLAlchemy model linking members to sports.
    """
    __tablename__ = "sport_subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    member_id = Column(
        Integer,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Subscribed member"
    )
    sport_id = Column(
        Integer,
        ForeignKey("sports.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Sport subscribed to"
    )

    subscription_type = Column(
        String(10),
        nullable=False,
        comment="group or private"
    )

    created_at = Column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        comment="Subscription creation timestamp"
    )

    __table_args__ = (
        UniqueConstraint("member_id", "sport_id", name="uq_sport_subscriptions_member_sport"),
        CheckConstraint("subscription_type IN ('group', 'private')", name="subscription_type_valid"),
    )

    def __repr__(self) -> str:
        return f"<SportSubscriptionModel(member_id={self.member_id}, sport_id={self.sport_id})>"
