"""create_comments

Create the comments table:
- flat records, threaded through parent_comment_id (no foreign key)
- store-assigned integer id and creation date
- optional stored attachment filename

Revision ID: 3f2c9d1a7b40
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9d1a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("home_page", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", sa.Integer(), nullable=True),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("attachment", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_date", "comments", ["date"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_date", table_name="comments")
    op.drop_index("idx_comments_parent_comment_id", table_name="comments")
    op.drop_table("comments")
