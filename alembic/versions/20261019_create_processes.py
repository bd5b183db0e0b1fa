"""Create processes table

Revision ID: 001_processes
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_processes'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create processes table with all columns from ProcessDB model."""
    op.create_table(
        'processes',
        sa.Column('id', sa.String(length=50), nullable=False),
        sa.Column('case_type', sa.String(length=10), nullable=False),
        sa.Column('activity_type', sa.String(length=30), nullable=False),
        sa.Column('status', sa.String(length=30), nullable=False),
        sa.Column('department', sa.Text(), nullable=False),
        sa.Column('municipality', sa.Text(), nullable=False),
        sa.Column('occurred_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('narrative', sa.Text(), nullable=False),
        sa.Column('location', sa.JSON(), nullable=False),
        sa.Column('reporter', sa.JSON(), nullable=False),
        sa.Column('details', sa.JSON(), nullable=False),
        sa.Column('status_history', sa.JSON(), nullable=False),
        sa.Column('created_by', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Indexes back the list filters
    op.create_index(op.f('ix_processes_id'), 'processes', ['id'], unique=False)
    op.create_index(op.f('ix_processes_case_type'), 'processes', ['case_type'], unique=False)
    op.create_index(op.f('ix_processes_activity_type'), 'processes', ['activity_type'], unique=False)
    op.create_index(op.f('ix_processes_status'), 'processes', ['status'], unique=False)
    op.create_index(op.f('ix_processes_department'), 'processes', ['department'], unique=False)
    op.create_index(op.f('ix_processes_occurred_at'), 'processes', ['occurred_at'], unique=False)
    op.create_index(op.f('ix_processes_created_by'), 'processes', ['created_by'], unique=False)
    op.create_index(op.f('ix_processes_created_at'), 'processes', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop processes table and all indexes."""
    op.drop_index(op.f('ix_processes_created_at'), table_name='processes')
    op.drop_index(op.f('ix_processes_created_by'), table_name='processes')
    op.drop_index(op.f('ix_processes_occurred_at'), table_name='processes')
    op.drop_index(op.f('ix_processes_department'), table_name='processes')
    op.drop_index(op.f('ix_processes_status'), table_name='processes')
    op.drop_index(op.f('ix_processes_activity_type'), table_name='processes')
    op.drop_index(op.f('ix_processes_case_type'), table_name='processes')
    op.drop_index(op.f('ix_processes_id'), table_name='processes')
    op.drop_table('processes')
