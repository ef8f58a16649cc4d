"""backfill plus_one metadata from guests

Revision ID: 8b4e6d2f0a21
Revises: 3f1c2a7b9d10
Create Date: 2026-10-01 09:00:00.000000

"""

from alembic import op

# revision identifiers, used by Alembic.
revision = "8b4e6d2f0a21"
down_revision = "3f1c2a7b9d10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Rows registered with only a guest count get an explicit plus_one flag.
    # guests itself is left as stored. SQL NULL and JSON values other than an
    # object (e.g. a JSON null) are replaced by a fresh object.
    op.execute("""
        UPDATE registrations
        SET metadata = CASE
                WHEN jsonb_typeof(metadata) = 'object' THEN metadata
                ELSE '{}'::jsonb
            END
            || jsonb_build_object('plus_one', guests > 0)
        WHERE metadata IS NULL
            OR jsonb_typeof(metadata) <> 'object'
            OR metadata -> 'plus_one' IS NULL
    """)


def downgrade() -> None:
    # guests already holds the same information
    pass
