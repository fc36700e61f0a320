"""Create the five section-scoped tables

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2025-01-06 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7d9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), nullable=False)


def upgrade() -> None:
    """Create teachers, students, announcements, materials and timetables."""
    op.create_table(
        'teachers',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('section', sa.String(), nullable=False),
        _created_at(),
    )
    op.create_table(
        'students',
        sa.Column('roll', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('parent_phone', sa.String(), nullable=True),
        sa.Column('fee_status', sa.String(), nullable=True),
        sa.Column('section', sa.String(), nullable=False),
        _created_at(),
    )
    op.create_table(
        'announcements',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('author', sa.String(), nullable=True),
        sa.Column('section', sa.String(), nullable=False),
        _created_at(),
    )
    op.create_table(
        'materials',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_url', sa.String(), nullable=True),
        sa.Column('uploaded_by', sa.String(), nullable=True),
        sa.Column('section', sa.String(), nullable=False),
        _created_at(),
    )
    op.create_table(
        'timetables',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('day', sa.String(), nullable=False),
        sa.Column('period', sa.String(), nullable=True),
        sa.Column('subject', sa.String(), nullable=True),
        sa.Column('teacher', sa.String(), nullable=True),
        sa.Column('start_time', sa.String(), nullable=True),
        sa.Column('end_time', sa.String(), nullable=True),
        sa.Column('section', sa.String(), nullable=False),
        _created_at(),
    )

    for table in ('teachers', 'students', 'announcements', 'materials', 'timetables'):
        op.create_index(f'ix_{table}_section', table, ['section'])
    op.create_index('ix_announcements_created_at', 'announcements', ['created_at'])


def downgrade() -> None:
    """Drop the section tables."""
    op.drop_index('ix_announcements_created_at', table_name='announcements')
    for table in ('timetables', 'materials', 'announcements', 'students', 'teachers'):
        op.drop_index(f'ix_{table}_section', table_name=table)
        op.drop_table(table)
