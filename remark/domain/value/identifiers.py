"""Strongly typed identifiers for domain entities."""

from typing import NewType

# Store-assigned, monotonically increasing
CommentId = NewType("CommentId", int)
