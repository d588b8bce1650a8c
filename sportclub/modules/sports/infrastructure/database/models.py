# 📄 File: sportclub/modules/sports/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how sports are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the sports table: unique name, NUMERIC(10,2) price and the allowed
# gender, with check constraints mirroring the domain rules.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - sportclub.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - sport_repository_impl.py
# - sportclub.modules.subscriptions.infrastructure.database.models (foreign key target)
# - Alembic migrations

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from sportclub.shared.config.database import DatabaseBase


class SportModel(DatabaseBase):
    """
    SQLAlchemy model for sports offered by the club.
    """
    __tablename__ = "sports"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned sport identifier"
    )

    name = Column(
        String(100),
        nullable=False,
        unique=True,
        comment="Unique sport name"
    )

    subscription_price = Column(
        Numeric(10, 2),
        nullable=False,
        comment="Subscription price, two decimal places"
    )

    allowed_gender = Column(
        String(10),
        nullable=False,
        comment="male, female or mix"
    )

    __table_args__ = (
        CheckConstraint("subscription_price > 0", name="price_positive"),
        CheckConstraint("allowed_gender IN ('male', 'female', 'mix')", name="allowed_gender_valid"),
    )

    def __repr__(self) -> str:
        return f"<SportModel(id={self.id}, name='{self.name}')>"
