"""Index document creation time for retention jobs.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_index("ix_document_created_at", "document", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_document_created_at", table_name="document")
