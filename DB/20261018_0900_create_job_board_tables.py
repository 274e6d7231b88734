"""create job_postings and applications tables

Revision ID: 20261018_0900
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261018_0900'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the job board tables.

    - job_postings: employer openings moderated through pending/approved/rejected/closed
    - applications: one row per (job, applicant), carrying the match score
      computed at submission time
    """
    op.create_table(
        'job_postings',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('company_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('job_type', sa.String(length=50), nullable=False, server_default='full-time'),
        sa.Column('experience_level', sa.String(length=50), nullable=False, server_default='mid'),
        sa.Column('remote_ok', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('requirements', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('responsibilities', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('benefits', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('salary_min', sa.Integer(), nullable=True),
        sa.Column('salary_max', sa.Integer(), nullable=True),
        sa.Column('salary_currency', sa.String(length=10), nullable=False, server_default='USD'),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending',
                  comment='pending, approved, rejected, closed'),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            'salary_min IS NULL OR salary_max IS NULL OR salary_max >= salary_min',
            name='ck_job_postings_salary_range'
        ),
    )
    op.create_index('ix_job_postings_company_id', 'job_postings', ['company_id'])
    op.create_index('ix_job_postings_status', 'job_postings', ['status'])
    op.create_index('ix_job_postings_title', 'job_postings', ['title'])

    op.create_table(
        'applications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('applicant_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('years_of_experience', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('skills', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('qualifications', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('linkedin_url', sa.String(length=1000), nullable=True),
        sa.Column('portfolio_url', sa.String(length=1000), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending',
                  comment='pending, reviewing, shortlisted, rejected, hired'),
        sa.Column('match_score', sa.Integer(), nullable=True, comment='0-100, NULL when unscored'),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['job_postings.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('job_id', 'applicant_id', name='uq_applications_job_id_applicant_id'),
        sa.CheckConstraint('years_of_experience >= 0', name='ck_applications_experience'),
        sa.CheckConstraint(
            'match_score IS NULL OR (match_score >= 0 AND match_score <= 100)',
            name='ck_applications_match_score'
        ),
    )
    op.create_index('ix_applications_job_id', 'applications', ['job_id'])
    op.create_index('ix_applications_applicant_id', 'applications', ['applicant_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])
    op.create_index('ix_applications_match_score', 'applications', ['match_score'])


def downgrade() -> None:
    op.drop_index('ix_applications_match_score', table_name='applications')
    op.drop_index('ix_applications_status', table_name='applications')
    op.drop_index('ix_applications_applicant_id', table_name='applications')
    op.drop_index('ix_applications_job_id', table_name='applications')
    op.drop_table('applications')

    op.drop_index('ix_job_postings_title', table_name='job_postings')
    op.drop_index('ix_job_postings_status', table_name='job_postings')
    op.drop_index('ix_job_postings_company_id', table_name='job_postings')
    op.drop_table('job_postings')
