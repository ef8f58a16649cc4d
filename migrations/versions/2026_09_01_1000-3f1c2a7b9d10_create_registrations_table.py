"""create registrations table

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-09-01 10:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "3f1c2a7b9d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "registrations",
        sa.Column("uuid", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("email", sa.String(length=200), nullable=False),
        sa.Column("full_name", sa.String(length=120), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("company", sa.String(length=120), nullable=True),
        sa.Column("guests", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "metadata",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=True,
        ),
        sa.Column(
            "status",
            sa.Enum("submitted", "updated", name="registration_status_enum"),
            nullable=False,
        ),
        sa.Column("edit_token", sa.String(length=128), nullable=False),
        sa.Column("edit_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_registrations_email", "registrations", ["email"], unique=True)
    op.create_index("ix_registrations_edit_token", "registrations", ["edit_token"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_registrations_edit_token", table_name="registrations")
    op.drop_index("ix_registrations_email", table_name="registrations")
    op.drop_table("registrations")
    sa.Enum(name="registration_status_enum").drop(op.get_bind(), checkfirst=True)
