"""Domain services."""

from .sanitizer import ContentSanitizer
from .submission_service import ImageNormalizer, SubmissionService
from .thread_service import ThreadService

__all__ = [
    "ContentSanitizer",
    "ImageNormalizer",
    "SubmissionService",
    "ThreadService",
]
