"""Comment use cases."""

from .get_comment_thread import GetCommentThreadRequest, GetCommentThreadUseCase
from .get_top_level_comments import (
    GetTopLevelCommentsRequest,
    GetTopLevelCommentsUseCase,
)
from .schemas import CommentItem, CommentThreadItem
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentThreadItem",
    "GetCommentThreadRequest",
    "GetCommentThreadUseCase",
    "GetTopLevelCommentsRequest",
    "GetTopLevelCommentsUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
