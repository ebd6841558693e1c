"""Create catalog tables (locations, transportations)

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Locations table
    op.create_table(
        'locations',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('code', sa.String(10), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_locations_code', 'locations', ['code'])
    op.create_index('ix_locations_deleted_display_order', 'locations', ['deleted', 'display_order'])

    # Transportations table (directed edges between locations)
    op.create_table(
        'transportations',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('origin_location_id', sa.Uuid(), sa.ForeignKey('locations.id'), nullable=False),
        sa.Column('destination_location_id', sa.Uuid(), sa.ForeignKey('locations.id'), nullable=False),
        sa.Column('transportation_type', sa.String(20), nullable=False),
        sa.Column('operating_days', sa.String(50), nullable=False),
        sa.Column('deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('origin_location_id <> destination_location_id', name='ck_transportations_distinct_endpoints'),
    )
    op.create_index('ix_transportations_origin_dest', 'transportations', ['origin_location_id', 'destination_location_id'])
    op.create_index('ix_transportations_type_deleted', 'transportations', ['transportation_type', 'deleted'])


def downgrade() -> None:
    op.drop_index('ix_transportations_type_deleted', table_name='transportations')
    op.drop_index('ix_transportations_origin_dest', table_name='transportations')
    op.drop_table('transportations')
    op.drop_index('ix_locations_deleted_display_order', table_name='locations')
    op.drop_index('ix_locations_code', table_name='locations')
    op.drop_table('locations')
