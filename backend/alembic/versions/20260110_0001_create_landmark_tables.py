"""Create landmark, mission, check-in and certificate tables.

Revision ID: 20260110_0001
Revises:
Create Date: 2026-01-10

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20260110_0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('token_version', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'locations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(128), nullable=False),
        sa.Column('country', sa.String(128), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(1024), nullable=False),
        sa.Column('facts', sa.JSON(), nullable=False),
        sa.Column('model_url', sa.String(1024), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_locations_featured', 'locations', ['featured'])

    op.create_table(
        'missions',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('location_id', sa.String(36), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_missions_location_id', 'missions', ['location_id'])
    op.create_index('ix_missions_location_active', 'missions', ['location_id', 'active'])

    op.create_table(
        'location_recommendations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('source_location_id', sa.String(36), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('recommended_location_id', sa.String(36), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('reason', sa.String(512), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('source_location_id', 'recommended_location_id', name='uq_location_recommendation'),
    )
    op.create_index(
        'ix_location_recommendations_source_location_id',
        'location_recommendations',
        ['source_location_id'],
    )

    op.create_table(
        'check_ins',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('location_id', sa.String(36), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('mission_id', sa.String(36), sa.ForeignKey('missions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('points_earned', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'mission_id', name='uq_user_mission_check_in'),
    )
    op.create_index('ix_check_ins_user_id', 'check_ins', ['user_id'])
    op.create_index('ix_check_ins_location_id', 'check_ins', ['location_id'])
    op.create_index('ix_check_ins_mission_id', 'check_ins', ['mission_id'])
    op.create_index('ix_check_ins_user_location', 'check_ins', ['user_id', 'location_id'])

    op.create_table(
        'certificates',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('location_id', sa.String(36), sa.ForeignKey('locations.id', ondelete='SET NULL'), nullable=True),
        sa.Column('is_master', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('points_earned', sa.Integer(), nullable=False),
        sa.Column('certificate_url', sa.String(1024), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_certificates_user_id', 'certificates', ['user_id'])
    op.create_index('ix_certificates_location_id', 'certificates', ['location_id'])

    op.create_table(
        'email_templates',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(64), nullable=False),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('body', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_email_templates_name', 'email_templates', ['name'], unique=True)


def downgrade():
    op.drop_index('ix_email_templates_name')
    op.drop_table('email_templates')
    op.drop_index('ix_certificates_location_id')
    op.drop_index('ix_certificates_user_id')
    op.drop_table('certificates')
    op.drop_index('ix_check_ins_user_location')
    op.drop_index('ix_check_ins_mission_id')
    op.drop_index('ix_check_ins_location_id')
    op.drop_index('ix_check_ins_user_id')
    op.drop_table('check_ins')
    op.drop_index('ix_location_recommendations_source_location_id')
    op.drop_table('location_recommendations')
    op.drop_index('ix_missions_location_active')
    op.drop_index('ix_missions_location_id')
    op.drop_table('missions')
    op.drop_index('ix_locations_featured')
    op.drop_table('locations')
    op.drop_index('ix_users_username')
    op.drop_index('ix_users_email')
    op.drop_table('users')
