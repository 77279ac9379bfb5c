"""Initial schema for VenuEase

Revision ID: 20261001_000000
Revises: None
Create Date: 2026-10-01 00:00:00.000000

Creates the tables of the booking site and the admin console:
- customers, admin (accounts)
- venue, events (catalogue)
- booking, payment (reservations)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261001_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("date_created", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("customer_id"),
    )
    op.create_index("ix_customers_email", "customers", ["email"], unique=True)

    op.create_table(
        "admin",
        sa.Column("admin_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), nullable=False, server_default="staff"),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("date_created", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("admin_id"),
    )
    op.create_index("ix_admin_email", "admin", ["email"], unique=True)

    op.create_table(
        "venue",
        sa.Column("venue_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("venue_name", sa.String(150), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("contact_phone", sa.String(32), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("date_created", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("venue_id"),
    )
    op.create_index("ix_venue_venue_name", "venue", ["venue_name"])

    op.create_table(
        "events",
        sa.Column("event_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("event_name", sa.String(150), nullable=False),
        sa.Column("event_type", sa.String(64), nullable=True),
        sa.Column("event_date", sa.DateTime(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("event_id"),
    )
    op.create_index("ix_events_event_date", "events", ["event_date"])

    op.create_table(
        "booking",
        sa.Column("booking_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("venue_id", sa.Integer(), nullable=False),
        sa.Column("event_id", sa.Integer(), nullable=True),
        sa.Column("booking_date", sa.DateTime(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("total_amount", sa.Float(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("booking_id"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.customer_id"]),
        sa.ForeignKeyConstraint(["venue_id"], ["venue.venue_id"]),
        sa.ForeignKeyConstraint(["event_id"], ["events.event_id"]),
    )
    op.create_index("ix_booking_customer_id", "booking", ["customer_id"])
    op.create_index("ix_booking_venue_id", "booking", ["venue_id"])
    op.create_index("ix_booking_booking_date", "booking", ["booking_date"])

    op.create_table(
        "payment",
        sa.Column("payment_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("booking_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("payment_method", sa.String(32), nullable=False),
        sa.Column("payment_status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("payment_date", sa.DateTime(), nullable=False),
        sa.Column("transaction_ref", sa.String(128), nullable=True),
        sa.PrimaryKeyConstraint("payment_id"),
        sa.ForeignKeyConstraint(["booking_id"], ["booking.booking_id"]),
    )
    op.create_index("ix_payment_booking_id", "payment", ["booking_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("payment")
    op.drop_table("booking")
    op.drop_table("events")
    op.drop_table("venue")
    op.drop_table("admin")
    op.drop_table("customers")
