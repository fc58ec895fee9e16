"""Create clinic, credential and weather tables

Revision ID: 001
Revises: None
Create Date: 2025-01-15 00:00:00.000000+00:00

What:  Creates users, user_accounts, Owner, Pet, Appointment and WeatherLog.
How:   Owner/Pet/Appointment keys are supplied by the client, so their
       primary keys are plain integers without a sequence. There are no
       foreign keys between the clinic tables.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── Credentials & roles ──────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "user_accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "role",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'user'"),
            comment="guest, user or admin; anything else is treated as user",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_accounts_email", "user_accounts", ["email"])

    # ── Clinic records ───────────────────────────────────────────────────
    op.create_table(
        "Owner",
        sa.Column("owner_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False, server_default=sa.text("''")),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False, server_default=sa.text("''")),
        sa.PrimaryKeyConstraint("owner_id"),
    )

    op.create_table(
        "Pet",
        sa.Column("pet_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("species", sa.String(50), nullable=False),
        sa.Column("gender", sa.String(20), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("pet_id"),
    )
    op.create_index("ix_Pet_owner_id", "Pet", ["owner_id"])

    op.create_table(
        "Appointment",
        sa.Column("appointment_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("vet_id", sa.Integer(), nullable=False),
        sa.Column("appointment_date", sa.Date(), nullable=False),
        sa.Column("appointment_time", sa.Time(), nullable=False),
        sa.Column("reason", sa.String(255), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("appointment_id"),
    )
    op.create_index("ix_Appointment_pet_id", "Appointment", ["pet_id"])

    # ── Weather log (append-only) ────────────────────────────────────────
    op.create_table(
        "WeatherLog",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("temperature_c", sa.Float(), nullable=False),
        sa.Column("windspeed", sa.Float(), nullable=False),
        sa.Column(
            "logged_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Backs GET /api/weather/logs (ORDER BY logged_at DESC LIMIT 50)
    op.create_index(
        "idx_weatherlog_logged_at",
        "WeatherLog",
        [sa.text("logged_at DESC")],
    )


def downgrade() -> None:
    """Drop every table created above. All data is lost."""
    op.drop_index("idx_weatherlog_logged_at", table_name="WeatherLog")
    op.drop_table("WeatherLog")
    op.drop_index("ix_Appointment_pet_id", table_name="Appointment")
    op.drop_table("Appointment")
    op.drop_index("ix_Pet_owner_id", table_name="Pet")
    op.drop_table("Pet")
    op.drop_table("Owner")
    op.drop_index("ix_user_accounts_email", table_name="user_accounts")
    op.drop_table("user_accounts")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
