# 📄 File: sportclub/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the business areas of the sport club (members, sports, subscriptions) and lets the
# database layer find every table they define.
# 🧪 Purpose (Technical Summary):
# Modules package. register_models() imports each module's ORM models so they are attached
# to DatabaseBase.metadata before create_all or Alembic autogeneration.
# 🔗 Dependencies:
# - sportclub.modules.*.infrastructure.database.models
# 🔄 Connected Modules / Calls From:
# - sportclub.shared.infrastructure.database.connection (create_tables)
# - migrations/env.py
# - tests/conftest.py


def register_models() -> None:
    """Import every module's ORM models onto the shared metadata."""
    from sportclub.modules.membership.infrastructure.database import models as membership_models  # noqa: F401
    from sportclub.modules.sports.infrastructure.database import models as sports_models  # noqa: F401
    from sportclub.modules.subscriptions.infrastructure.database import models as subscription_models  # noqa: F401


__all__ = ["register_models"]
