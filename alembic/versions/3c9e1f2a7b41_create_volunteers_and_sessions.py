"""create volunteers and volunteer_sessions

Revision ID: 3c9e1f2a7b41
Revises:
Create Date: 2026-10-19 09:12:03.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e1f2a7b41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


age_group_enum = sa.Enum(
    'kids', 'teens', 'young_adults', 'adults', name='age_group', create_constraint=False
)
session_source_enum = sa.Enum(
    'manual', 'clock', name='session_source', create_constraint=False
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'volunteers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=40), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('age_group', age_group_enum, nullable=False),
        sa.Column('password_hash', sa.String(length=200), nullable=False),
        sa.Column('clocked_in_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_volunteers_email'), 'volunteers', ['email'], unique=True)

    op.create_table(
        'volunteer_sessions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('volunteer_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('duration_hours', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('source', session_source_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['volunteer_id'], ['volunteers.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_volunteer_sessions_volunteer_id'), 'volunteer_sessions', ['volunteer_id'], unique=False
    )
    op.create_index(op.f('ix_volunteer_sessions_date'), 'volunteer_sessions', ['date'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_volunteer_sessions_date'), table_name='volunteer_sessions')
    op.drop_index(op.f('ix_volunteer_sessions_volunteer_id'), table_name='volunteer_sessions')
    op.drop_table('volunteer_sessions')
    op.drop_index(op.f('ix_volunteers_email'), table_name='volunteers')
    op.drop_table('volunteers')
    bind = op.get_bind()
    session_source_enum.drop(bind, checkfirst=True)
    age_group_enum.drop(bind, checkfirst=True)
