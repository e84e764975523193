"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from remark.domain.model import Comment, NewComment
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, SortField, SortOrder

SORT_KEYS = {
    SortField.USER_NAME: lambda c: c.user_name,
    SortField.EMAIL: lambda c: c.email,
    SortField.DATE: lambda c: c.date,
}


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        sort_field: SortField = SortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> list[Comment]:
        """Find comments without a parent."""
        comments = [c for c in self._comments.values() if c.parent_comment_id is None]

        # Stable sorts: ID ascending first, then the requested key
        comments.sort(key=lambda c: c.id)
        comments.sort(
            key=SORT_KEYS[sort_field], reverse=sort_order == SortOrder.DESC
        )
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment."""
        comments = [
            c for c in self._comments.values() if c.parent_comment_id == parent_id
        ]
        comments.sort(key=lambda c: c.id)
        return comments

    async def add(self, comment: NewComment) -> Comment:
        """Insert a comment, assigning the next ID and the current time."""
        saved = Comment(
            id=CommentId(self._next_id),
            date=datetime.now(timezone.utc),
            **comment.model_dump(),
        )
        self._next_id += 1
        self._comments[saved.id] = saved
        return saved

    async def save(self, comment: Comment) -> Comment:
        """Store a fully formed comment as is.

        Lets tests seed records with chosen IDs, dates and parents.
        """
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)
        return comment
