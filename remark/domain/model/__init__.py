"""Domain model entities."""

from remark.domain.model.comment import Comment, CommentNode, NewComment
from remark.domain.model.submission import AttachmentUpload, CommentSubmission

__all__ = [
    "AttachmentUpload",
    "Comment",
    "CommentNode",
    "CommentSubmission",
    "NewComment",
]
