"""create_signage_schema

Revision ID: 3f2b9c41d7e0
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2b9c41d7e0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _tenant_fk() -> sa.Column:
    return sa.Column('tenant_id', sa.Integer(), sa.ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False)


def upgrade() -> None:
    """
    Create the tenant-scoped signage schema.

    Creates:
    - tenants table (one row per JWT subject)
    - integration_credentials table (one row per tenant and integration)
    - content, playlists, emergency_messages, settings, events, screens,
      each carrying an indexed tenant_id
    """
    # 1. Tenants
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=5), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tenants_subject'), 'tenants', ['subject'], unique=True)

    # 2. Integration credentials
    op.create_table(
        'integration_credentials',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('integration_name', sa.String(length=50), nullable=False),
        sa.Column('access_token', sa.Text(), nullable=False),
        sa.Column('refresh_token', sa.Text(), nullable=True),
        sa.Column('channel_ids', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'integration_name', name='uq_tenant_integration')
    )
    op.create_index(op.f('ix_integration_credentials_tenant_id'), 'integration_credentials', ['tenant_id'])

    # 3. Content
    op.create_table(
        'content',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('content_type', sa.String(length=12), nullable=False),
        sa.Column('media_url', sa.String(length=1024), nullable=True),
        sa.Column('source', sa.String(length=100), nullable=True),
        sa.Column('channel', sa.String(length=255), nullable=True),
        sa.Column('external_id', sa.String(length=255), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('priority_order', sa.Integer(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_content_tenant_id'), 'content', ['tenant_id'])
    op.create_index('ix_content_tenant_external', 'content', ['tenant_id', 'external_id'])

    # 4. Playlists
    op.create_table(
        'playlists',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_playlists_tenant_id'), 'playlists', ['tenant_id'])

    # 5. Emergency messages
    op.create_table(
        'emergency_messages',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('importance', sa.String(length=8), nullable=False),
        sa.Column('background_color', sa.String(length=20), nullable=False),
        sa.Column('text_color', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_emergency_messages_tenant_id'), 'emergency_messages', ['tenant_id'])

    # 6. Settings
    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('setting_key', sa.String(length=100), nullable=False),
        sa.Column('setting_value', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'setting_key', name='uq_tenant_setting_key')
    )
    op.create_index(op.f('ix_settings_tenant_id'), 'settings', ['tenant_id'])

    # 7. Events
    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_tenant_id'), 'events', ['tenant_id'])
    op.create_index('ix_events_tenant_start', 'events', ['tenant_id', 'start_time'])

    # 8. Screens (after playlists for the current_playlist_id FK)
    op.create_table(
        'screens',
        sa.Column('id', sa.Integer(), nullable=False),
        _tenant_fk(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('resolution', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=7), nullable=False),
        sa.Column('current_playlist_id', sa.Integer(), nullable=True),
        sa.Column('device_token_hash', sa.String(length=64), nullable=False),
        sa.Column('last_seen_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['current_playlist_id'], ['playlists.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_screens_tenant_id'), 'screens', ['tenant_id'])
    op.create_index(op.f('ix_screens_device_token_hash'), 'screens', ['device_token_hash'], unique=True)


def downgrade() -> None:
    """Drop all signage tables (reverse dependency order)."""
    op.drop_table('screens')
    op.drop_table('events')
    op.drop_table('settings')
    op.drop_table('emergency_messages')
    op.drop_table('playlists')
    op.drop_table('content')
    op.drop_table('integration_credentials')
    op.drop_table('tenants')
