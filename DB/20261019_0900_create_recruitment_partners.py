"""create recruitment_partners table

Revision ID: 20261019_0900
Revises: 20261018_0900
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261019_0900'
down_revision: Union[str, None] = '20261018_0900'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the recruitment partner directory.

    Agencies sign up in pending status; only approved rows are listed
    publicly, featured partners first.
    """
    op.create_table(
        'recruitment_partners',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('submitted_by', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('specialty', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('website_url', sa.String(length=1000), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('contact_person', sa.String(length=255), nullable=True),
        sa.Column('registration_number', sa.String(length=100), nullable=True),
        sa.Column('years_in_business', sa.Integer(), nullable=True),
        sa.Column('team_size', sa.String(length=50), nullable=True),
        sa.Column('pricing_model', sa.String(length=255), nullable=True),
        sa.Column('linkedin_url', sa.String(length=1000), nullable=True),
        sa.Column('facebook_url', sa.String(length=1000), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending',
                  comment='pending, approved, rejected, suspended'),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('featured_until', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_recruitment_partners_email'),
        sa.CheckConstraint(
            'years_in_business IS NULL OR years_in_business >= 0',
            name='ck_recruitment_partners_years'
        ),
    )
    op.create_index('ix_recruitment_partners_submitted_by', 'recruitment_partners', ['submitted_by'])
    op.create_index('ix_recruitment_partners_specialty', 'recruitment_partners', ['specialty'])
    op.create_index('ix_recruitment_partners_status', 'recruitment_partners', ['status'])


def downgrade() -> None:
    op.drop_index('ix_recruitment_partners_status', table_name='recruitment_partners')
    op.drop_index('ix_recruitment_partners_specialty', table_name='recruitment_partners')
    op.drop_index('ix_recruitment_partners_submitted_by', table_name='recruitment_partners')
    op.drop_table('recruitment_partners')
