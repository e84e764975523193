"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence and adapter layers.
"""

from remark.domain.repository.attachment import AttachmentStorage
from remark.domain.repository.comment import CommentRepository

__all__ = [
    "AttachmentStorage",
    "CommentRepository",
]
