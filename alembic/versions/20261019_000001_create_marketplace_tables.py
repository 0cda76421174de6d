"""Create account, category and ad tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Creates users and admins (credential store), categories (reference data)
and ads (listings).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _account_columns():
    return [
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('otp', sa.String(10), nullable=True),
        sa.Column('otp_expires_at', sa.DateTime(), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create the marketplace tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('address', sa.String(255), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(100), nullable=True),
        sa.Column('zip_code', sa.String(20), nullable=True),
        sa.Column('role', sa.String(50), nullable=False, server_default='user'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_account_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(200), nullable=False),
        *_account_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)
    op.create_index('ix_admins_created_at', 'admins', ['created_at'])

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('category_id', sa.String(32), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('platform', sa.String(100), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('updated_by', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('category_id', name='uq_categories_category_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_categories_user_id'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_categories_created_by'),
        sa.ForeignKeyConstraint(['updated_by'], ['users.id'], name='fk_categories_updated_by'),
    )
    op.create_index('ix_categories_user_id', 'categories', ['user_id'])
    op.create_index('ix_categories_created_at', 'categories', ['created_at'])

    op.create_table(
        'ads',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('platform_id', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('duration_value', sa.Integer(), nullable=False),
        sa.Column(
            'duration_unit',
            sa.Enum('hour', 'day', 'week', 'month', 'year', name='duration_unit', create_constraint=True),
            nullable=False
        ),
        sa.Column('contact_email', sa.String(255), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('updated_by', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price >= 0', name='ck_ads_price_non_negative'),
        sa.CheckConstraint('duration_value >= 1', name='ck_ads_duration_value_positive'),
        sa.ForeignKeyConstraint(['platform_id'], ['categories.id'], name='fk_ads_platform_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_ads_user_id'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_ads_created_by'),
        sa.ForeignKeyConstraint(['updated_by'], ['users.id'], name='fk_ads_updated_by'),
    )

    # Create indexes for common queries
    op.create_index('ix_ads_platform_id', 'ads', ['platform_id'])
    op.create_index('ix_ads_user_id', 'ads', ['user_id'])
    op.create_index('ix_ads_duration_unit', 'ads', ['duration_unit'])
    op.create_index('ix_ads_is_active', 'ads', ['is_active'])
    op.create_index('ix_ads_created_at', 'ads', ['created_at'])


def downgrade() -> None:
    """Drop the marketplace tables."""
    for index, table in (
        ('ix_ads_created_at', 'ads'),
        ('ix_ads_is_active', 'ads'),
        ('ix_ads_duration_unit', 'ads'),
        ('ix_ads_user_id', 'ads'),
        ('ix_ads_platform_id', 'ads'),
    ):
        op.drop_index(index, table_name=table)
    op.drop_table('ads')

    op.drop_index('ix_categories_created_at', table_name='categories')
    op.drop_index('ix_categories_user_id', table_name='categories')
    op.drop_table('categories')

    op.drop_index('ix_admins_created_at', table_name='admins')
    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_table('admins')

    op.drop_index('ix_users_created_at', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
