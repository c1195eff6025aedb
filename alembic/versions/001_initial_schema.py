"""Initial database schema

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Clients and staff
    op.create_table(
        'clients',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('role', sa.Enum('client', 'admin', name='clientrole'), nullable=False, server_default='client'),
        sa.Column('profile_unlocked', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('onboarding_submitted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('onboarding_submitted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_clients_email', 'clients', ['email'], unique=True)

    # Tracked applications
    op.create_table(
        'applications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('client_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('company_name', sa.String(100), nullable=False),
        sa.Column('job_title', sa.String(200), nullable=False),
        sa.Column('job_url', sa.String(2048), nullable=True),
        sa.Column('job_description', sa.Text(), nullable=True),
        sa.Column('salary_range', sa.String(100), nullable=True),
        sa.Column('location', sa.String(200), nullable=True),
        sa.Column('job_type', sa.String(50), nullable=True),
        sa.Column('application_method', sa.String(100), nullable=True),
        sa.Column('application_strategy', sa.Text(), nullable=True),
        sa.Column('status', sa.String(50), nullable=False, server_default='applied'),
        sa.Column('status_update_reason', sa.Text(), nullable=True),
        sa.Column('application_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interview_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interview_type', sa.String(50), nullable=True),
        sa.Column('interview_notes', sa.Text(), nullable=True),
        sa.Column('offer_amount', sa.Numeric(12, 2), nullable=True),
        sa.Column('offer_benefits', sa.Text(), nullable=True),
        sa.Column('offer_deadline', sa.DateTime(timezone=True), nullable=True),
        sa.Column('tailored_resume_url', sa.String(2048), nullable=True),
        sa.Column('cover_letter_url', sa.String(2048), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['client_id'], ['clients.id'], ondelete='CASCADE')
    )
    op.create_index('ix_applications_client_id', 'applications', ['client_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])

    # Dashboard notifications
    op.create_table(
        'notifications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('user_type', sa.String(20), nullable=False),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    # Consultation bookings
    op.create_table(
        'consultation_requests',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('preferred_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('preferred_time', sa.String(5), nullable=False),
        sa.Column('package_interest', sa.String(50), nullable=False),
        sa.Column('current_situation', sa.Text(), nullable=True),
        sa.Column('timeline', sa.String(50), nullable=False),
        sa.Column('status', sa.String(50), nullable=False, server_default='pending'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['clients.id'], ondelete='SET NULL')
    )
    op.create_index('ix_consultation_requests_user_id', 'consultation_requests', ['user_id'])
    op.create_index('ix_consultation_requests_email', 'consultation_requests', ['email'])

    # Onboarding questionnaire
    op.create_table(
        'client_onboarding',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('target_job_titles', postgresql.JSONB(), nullable=False),
        sa.Column('target_industries', postgresql.JSONB(), nullable=False),
        sa.Column('target_company_sizes', postgresql.JSONB(), nullable=False),
        sa.Column('target_locations', postgresql.JSONB(), nullable=False),
        sa.Column('remote_work_preference', sa.String(20), nullable=False),
        sa.Column('current_salary_range', sa.String(50), nullable=True),
        sa.Column('target_salary_range', sa.String(50), nullable=True),
        sa.Column('salary_negotiation_comfort', sa.Integer(), nullable=False),
        sa.Column('years_of_experience', sa.Integer(), nullable=False),
        sa.Column('key_technical_skills', postgresql.JSONB(), nullable=False),
        sa.Column('soft_skills_strengths', postgresql.JSONB(), nullable=False),
        sa.Column('certifications_licenses', postgresql.JSONB(), nullable=False),
        sa.Column('job_search_timeline', sa.String(20), nullable=False),
        sa.Column('application_volume_preference', sa.String(20), nullable=False),
        sa.Column('networking_comfort_level', sa.Integer(), nullable=False),
        sa.Column('interview_confidence_level', sa.Integer(), nullable=False),
        sa.Column('career_goals_short_term', sa.Text(), nullable=False),
        sa.Column('career_goals_long_term', sa.Text(), nullable=True),
        sa.Column('biggest_career_challenges', postgresql.JSONB(), nullable=False),
        sa.Column('support_areas_needed', postgresql.JSONB(), nullable=False),
        sa.Column('execution_status', sa.String(20), nullable=False, server_default='pending_approval'),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_by', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['clients.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index('ix_client_onboarding_user_id', 'client_onboarding', ['user_id'])


def downgrade() -> None:
    op.drop_table('client_onboarding')
    op.drop_table('consultation_requests')
    op.drop_table('notifications')
    op.drop_table('applications')
    op.drop_table('clients')

    # Drop enums
    op.execute('DROP TYPE IF EXISTS clientrole')
