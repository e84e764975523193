"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text, func
from sqlalchemy.types import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_comment_id has no foreign key. Readers treat a dangling parent as absent.
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("home_page", Text, nullable=True),
    Column("text", Text, nullable=False),
    Column("parent_comment_id", Integer, nullable=True),
    Column(
        "date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("attachment", String(255), nullable=True),  # Stored filename
)

Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_date", comments_table.c.date)
