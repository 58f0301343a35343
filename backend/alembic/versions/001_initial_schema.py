"""Initial schema: users, donation_requests, fundings.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("avatar", sa.Text, nullable=True),
        sa.Column("blood_group", sa.String(5), nullable=True),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("upazila", sa.String(100), nullable=True),
        sa.Column("role", sa.String(20), nullable=True, server_default="donor"),
        sa.Column("status", sa.String(20), nullable=True, server_default="active"),
        sa.Column("extra", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "donation_requests",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("requester_name", sa.String(200), nullable=True),
        sa.Column("requester_email", sa.String(255), nullable=True),
        sa.Column("recipient_name", sa.String(200), nullable=True),
        sa.Column("blood_group", sa.String(5), nullable=True),
        sa.Column("recipient_district", sa.String(100), nullable=True),
        sa.Column("recipient_upazila", sa.String(100), nullable=True),
        sa.Column("hospital_name", sa.String(300), nullable=True),
        sa.Column("full_address", sa.Text, nullable=True),
        sa.Column("donation_date", sa.String(40), nullable=True),
        sa.Column("donation_time", sa.String(40), nullable=True),
        sa.Column("request_message", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("donor_name", sa.String(200), nullable=True),
        sa.Column("donor_email", sa.String(255), nullable=True),
        sa.Column("extra", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_donation_requests_requester_email", "donation_requests", ["requester_email"],
    )

    op.create_table(
        "fundings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(10), nullable=True),
        sa.Column("transaction_id", sa.String(255), nullable=False),
        sa.Column("payment_status", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_fundings_transaction_id", "fundings", ["transaction_id"], unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_fundings_transaction_id", table_name="fundings")
    op.drop_table("fundings")
    op.drop_index("ix_donation_requests_requester_email", table_name="donation_requests")
    op.drop_table("donation_requests")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
