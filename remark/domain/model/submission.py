"""Untrusted comment submission as received from a client."""

from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId


class AttachmentUpload(DomainModel):
    """A file uploaded alongside a comment."""

    filename: str
    content_type: Optional[str] = None
    content: bytes = Field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


class CommentSubmission(DomainModel):
    """Raw comment fields. Nothing here has been sanitized yet."""

    user_name: str
    email: str
    home_page: Optional[str] = None
    text: str
    parent_comment_id: Optional[CommentId] = None
    captcha: str
    attachment: Optional[AttachmentUpload] = None
