"""Domain value objects."""

from remark.domain.value.identifiers import CommentId
from remark.domain.value.types import SortField, SortOrder

__all__ = [
    "CommentId",
    "SortField",
    "SortOrder",
]
