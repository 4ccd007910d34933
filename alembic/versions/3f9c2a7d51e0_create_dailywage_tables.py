"""create_dailywage_tables

Creates users, providers, seekers and the seeker child tables
(seeker_work_types, seeker_available_days).

Revision ID: 3f9c2a7d51e0
Revises:
Create Date: 2026-10-19 15:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d51e0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('provider', 'seeker', name='userrole'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_phone', 'users', ['phone'], unique=True)

    op.create_table(
        'providers',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('work_type', sa.String(length=100), nullable=False),
        sa.Column('budget_per_day', sa.Numeric(10, 2), nullable=False),
        sa.Column('workers_needed', sa.Integer(), nullable=False),
        sa.Column('working_hours', sa.String(length=50), nullable=False),
        sa.Column('custom_hours', sa.String(length=100), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('work_start_time', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_providers_id', 'providers', ['id'])
    op.create_index('ix_providers_user_id', 'providers', ['user_id'], unique=True)
    op.create_index('ix_providers_work_type', 'providers', ['work_type'])
    op.create_index('ix_providers_created_at', 'providers', ['created_at'])

    op.create_table(
        'seekers',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('expected_wage', sa.Numeric(10, 2), nullable=False),
        sa.Column('hours_availability', sa.String(length=50), nullable=False),
        sa.Column('custom_hours', sa.String(length=100), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('experience', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_seekers_id', 'seekers', ['id'])
    op.create_index('ix_seekers_user_id', 'seekers', ['user_id'], unique=True)
    op.create_index('ix_seekers_created_at', 'seekers', ['created_at'])

    op.create_table(
        'seeker_work_types',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('seeker_id', sa.Integer(), nullable=False),
        sa.Column('work_type', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['seeker_id'], ['seekers.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_seeker_work_types_seeker_id', 'seeker_work_types', ['seeker_id'])
    op.create_index('ix_seeker_work_types_work_type', 'seeker_work_types', ['work_type'])

    op.create_table(
        'seeker_available_days',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('seeker_id', sa.Integer(), nullable=False),
        sa.Column('day', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['seeker_id'], ['seekers.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_seeker_available_days_seeker_id', 'seeker_available_days', ['seeker_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('seeker_available_days')
    op.drop_table('seeker_work_types')
    op.drop_table('seekers')
    op.drop_table('providers')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
