"""Mappers for converting between database rows and domain models.

Since domain models are immutable pydantic models, rows are mapped by hand
rather than through an ORM.
"""

from typing import Any, Dict

from remark.domain.model import Comment, NewComment
from remark.domain.value import CommentId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        user_name=row["user_name"],
        email=row["email"],
        home_page=row.get("home_page"),
        text=row["text"],
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        date=row["date"],
        attachment=row.get("attachment"),
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert NewComment domain model to database dict.

    Args:
        comment: Sanitized comment without ID or date

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()
