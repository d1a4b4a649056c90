"""create journal tables

Revision ID: 7c3e9a41d2b0
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c3e9a41d2b0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create cravings, recordings and motivational_messages tables."""
    op.create_table(
        'cravings',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('intensity', sa.Integer, nullable=False),
        sa.Column('duration', sa.Float, nullable=True),
        sa.Column('triggers', sa.JSON, nullable=False),
        sa.Column('notes', sa.Text, nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('management_strategy', sa.String(255), nullable=True),
        sa.Column('was_managed_successfully', sa.Boolean, nullable=False),
    )
    op.create_index('ix_cravings_timestamp', 'cravings', ['timestamp'])

    # SQLite requires the foreign key to be declared in CREATE TABLE
    op.create_table(
        'recordings',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('recording_type', sa.String(50), nullable=False),
        sa.Column('purpose', sa.String(50), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('notes', sa.Text, nullable=True),
        sa.Column('file_url', sa.String(1024), nullable=False),
        sa.Column('duration', sa.Float, nullable=False),
        sa.Column('thumbnail_url', sa.String(1024), nullable=True),
        sa.Column('last_played_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('play_count', sa.Integer, nullable=False),
        sa.Column(
            'craving_id',
            sa.Uuid,
            sa.ForeignKey('cravings.id', ondelete='CASCADE'),
            nullable=True,
        ),
    )
    op.create_index('ix_recordings_created_at', 'recordings', ['created_at'])
    op.create_index('ix_recordings_purpose', 'recordings', ['purpose'])
    op.create_index('ix_recordings_craving_id', 'recordings', ['craving_id'])

    op.create_table(
        'motivational_messages',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('content', sa.Text, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False),
        sa.Column('is_user_created', sa.Boolean, nullable=False),
        sa.Column('display_priority', sa.Integer, nullable=False),
        sa.Column('times_shown', sa.Integer, nullable=False),
        sa.Column('last_shown_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('was_helpful', sa.Boolean, nullable=True),
    )
    op.create_index('ix_motivational_messages_category', 'motivational_messages', ['category'])


def downgrade() -> None:
    """Drop the journal tables."""
    op.drop_index('ix_motivational_messages_category', 'motivational_messages')
    op.drop_table('motivational_messages')

    op.drop_index('ix_recordings_craving_id', 'recordings')
    op.drop_index('ix_recordings_purpose', 'recordings')
    op.drop_index('ix_recordings_created_at', 'recordings')
    op.drop_table('recordings')

    op.drop_index('ix_cravings_timestamp', 'cravings')
    op.drop_table('cravings')
