"""Create membership, sports and subscription tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create membership, sports and subscription tables"""

    # 1. Create members table (self-referencing family hierarchy)
    op.create_table('members',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('gender', sa.String(10), nullable=False),
        sa.Column('birthdate', sa.Date(), nullable=False),
        sa.Column('subscription_date', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('family_head_id', sa.Integer(), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_members'),
        sa.ForeignKeyConstraint(['family_head_id'], ['members.id'], ondelete='SET NULL',
                                name='fk_members_family_head_id_members'),
        sa.CheckConstraint("gender IN ('male', 'female')", name='ck_members_gender_valid'),
        sa.CheckConstraint('family_head_id IS NULL OR family_head_id <> id', name='ck_members_no_self_family_head'),
    )

    op.create_index('ix_members_family_head_id', 'members', ['family_head_id'])

    # 2. Create sports table
    op.create_table('sports',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('subscription_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('allowed_gender', sa.String(10), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_sports'),
        sa.UniqueConstraint('name', name='uq_sports_name'),
        sa.CheckConstraint('subscription_price > 0', name='ck_sports_price_positive'),
        sa.CheckConstraint("allowed_gender IN ('male', 'female', 'mix')", name='ck_sports_allowed_gender_valid'),
    )

    # 3. Create sport_subscriptions table
    op.create_table('sport_subscriptions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('sport_id', sa.Integer(), nullable=False),
        sa.Column('subscription_type', sa.String(10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_sport_subscriptions'),
        sa.ForeignKeyConstraint(['member_id'], ['members.id'], ondelete='CASCADE',
                                name='fk_sport_subscriptions_member_id_members'),
        sa.ForeignKeyConstraint(['sport_id'], ['sports.id'], ondelete='CASCADE',
                                name='fk_sport_subscriptions_sport_id_sports'),
        sa.UniqueConstraint('member_id', 'sport_id', name='uq_sport_subscriptions_member_sport'),
        sa.CheckConstraint("subscription_type IN ('group', 'private')", name='ck_sport_subscriptions_subscription_type_valid'),
    )

    op.create_index('ix_sport_subscriptions_member_id', 'sport_subscriptions', ['member_id'])
    op.create_index('ix_sport_subscriptions_sport_id', 'sport_subscriptions', ['sport_id'])


def downgrade() -> None:
    """Drop membership, sports and subscription tables"""
    op.drop_index('ix_sport_subscriptions_sport_id', table_name='sport_subscriptions')
    op.drop_index('ix_sport_subscriptions_member_id', table_name='sport_subscriptions')
    op.drop_table('sport_subscriptions')
    op.drop_table('sports')
    op.drop_index('ix_members_family_head_id', table_name='members')
    op.drop_table('members')
