"""Comment entity.

Comments form a tree through ``parent_comment_id`` only. The store keeps a
flat table; the nested view is rebuilt on read by the thread service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId


class NewComment(DomainModel):
    """A sanitized comment ready to be inserted.

    ``id`` and ``date`` are assigned by the store on insert.
    """

    user_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    home_page: Optional[str] = None
    text: str = Field(min_length=1)
    parent_comment_id: Optional[CommentId] = None
    attachment: Optional[str] = None  # Stored filename


class Comment(NewComment):
    """Comment entity as persisted."""

    id: CommentId
    date: datetime


class CommentNode(DomainModel):
    """A comment together with all of its replies, recursively."""

    comment: Comment
    children: list["CommentNode"] = Field(default_factory=list)

    def count(self) -> int:
        """Number of comments in this subtree, including this one."""
        return 1 + sum(child.count() for child in self.children)
