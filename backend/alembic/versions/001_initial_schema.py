"""Initial back-office schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

Location hierarchy (cities, properties, units), tenants, vendors, notice
types and the five record tables. Money as NUMERIC(10, 2) dollars; Yes/No
flags as VARCHAR(3).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    # === CITIES ===
    op.create_table(
        'cities',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False, index=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === PROPERTIES ===
    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('city_id', sa.Integer(), sa.ForeignKey('cities.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('name', sa.String(255), nullable=False, index=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === UNITS ===
    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('unit_name', sa.String(255), nullable=False, index=True),
        sa.Column('tenants', sa.Text(), nullable=True),
        sa.Column('vacant', sa.String(3), nullable=False, server_default='Yes'),
        sa.Column('listed', sa.String(3), nullable=False, server_default='No'),
        sa.Column('total_applications', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === TENANTS ===
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('unit_id', sa.Integer(), sa.ForeignKey('units.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('first_name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === VENDORS ===
    op.create_table(
        'vendors',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('city_id', sa.Integer(), sa.ForeignKey('cities.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('vendor_name', sa.String(255), nullable=False, index=True),
        sa.Column('service_type', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === NOTICE TYPES ===
    op.create_table(
        'notices',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('notice_name', sa.String(255), nullable=False, unique=True),
        sa.Column('days', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )

    # === MOVE-INS ===
    op.create_table(
        'move_ins',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('unit_id', sa.Integer(), sa.ForeignKey('units.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('tenant_name', sa.String(255), nullable=True),
        sa.Column('signed_lease', sa.String(3), nullable=False, index=True),
        sa.Column('lease_signing_date', sa.Date(), nullable=True, index=True),
        sa.Column('move_in_date', sa.Date(), nullable=True, index=True),
        sa.Column('paid_security_deposit_first_month_rent', sa.String(3), nullable=True),
        sa.Column('scheduled_paid_time', sa.Date(), nullable=True),
        sa.Column('handled_keys', sa.String(3), nullable=True),
        sa.Column('move_in_form_sent_date', sa.Date(), nullable=True),
        sa.Column('filled_move_in_form', sa.String(3), nullable=True),
        sa.Column('date_of_move_in_form_filled', sa.Date(), nullable=True),
        sa.Column('submitted_insurance', sa.String(3), nullable=True),
        sa.Column('date_of_insurance_expiration', sa.Date(), nullable=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        *_timestamps(),
    )

    # === MOVE-OUTS ===
    op.create_table(
        'move_outs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('unit_id', sa.Integer(), sa.ForeignKey('units.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('tenants_name', sa.String(255), nullable=True, index=True),
        sa.Column('move_out_date', sa.Date(), nullable=True, index=True),
        sa.Column('lease_status', sa.String(255), nullable=True, index=True),
        sa.Column('date_lease_ending_on_buildium', sa.Date(), nullable=True),
        sa.Column('keys_location', sa.String(255), nullable=True),
        sa.Column('utilities_under_our_name', sa.String(3), nullable=True),
        sa.Column('date_utility_put_under_our_name', sa.Date(), nullable=True),
        sa.Column('walkthrough', sa.Text(), nullable=True),
        sa.Column('repairs', sa.Text(), nullable=True),
        sa.Column('send_back_security_deposit', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('cleaning', sa.String(20), nullable=True),
        sa.Column('list_the_unit', sa.String(255), nullable=True),
        sa.Column('move_out_form', sa.String(20), nullable=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        *_timestamps(),
    )

    # === NOTICES & EVICTIONS ===
    op.create_table(
        'notice_and_evictions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('tenant_id', sa.Integer(), sa.ForeignKey('tenants.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('status', sa.String(255), nullable=True, index=True),
        sa.Column('date', sa.Date(), nullable=True, index=True),
        sa.Column('type_of_notice', sa.String(255), nullable=True, index=True),
        sa.Column('have_an_exception', sa.String(3), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('evictions', sa.String(255), nullable=True),
        sa.Column('sent_to_attorney', sa.String(3), nullable=True),
        sa.Column('hearing_dates', sa.Date(), nullable=True),
        sa.Column('evicted_or_payment_plan', sa.String(50), nullable=True),
        sa.Column('if_left', sa.String(3), nullable=True),
        sa.Column('writ_date', sa.Date(), nullable=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        *_timestamps(),
    )

    # === PAYMENTS ===
    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('unit_id', sa.Integer(), sa.ForeignKey('units.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('owes', sa.Numeric(10, 2), nullable=False),
        sa.Column('paid', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('left_to_pay', sa.Numeric(10, 2), nullable=True),
        sa.Column('status', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('reversed_payments', sa.String(255), nullable=True),
        sa.Column('permanent', sa.String(3), nullable=False),
        sa.Column('has_assistance', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('assistance_amount', sa.Numeric(10, 2), nullable=True),
        sa.Column('assistance_company', sa.String(255), nullable=True),
        sa.Column('is_hidden', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # === VENDOR TASKS ===
    op.create_table(
        'vendor_tasks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('task_submission_date', sa.Date(), nullable=False, index=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('unit_id', sa.Integer(), sa.ForeignKey('units.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('assigned_tasks', sa.Text(), nullable=False),
        sa.Column('any_scheduled_visits', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('task_ending_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(255), nullable=True),
        sa.Column('urgent', sa.String(3), nullable=False, index=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        'vendor_tasks',
        'payments',
        'notice_and_evictions',
        'move_outs',
        'move_ins',
        'notices',
        'vendors',
        'tenants',
        'units',
        'properties',
        'cities',
    ):
        op.drop_table(table)
