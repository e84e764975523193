"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.adapter.image import PillowImageNormalizer
from remark.config import SubmissionSettings, ThreadSettings
from remark.domain.repository import AttachmentStorage, CommentRepository
from remark.domain.service import (
    ContentSanitizer,
    ImageNormalizer,
    SubmissionService,
    ThreadService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped to align with repository/session lifecycle.
    The sanitizer and image normalizer hold no request state and live for
    the whole application.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_content_sanitizer(self, settings: SubmissionSettings) -> ContentSanitizer:
        """Provide markup sanitizer."""
        return ContentSanitizer(settings)

    @provide(scope=Scope.APP)
    def get_image_normalizer(self) -> ImageNormalizer:
        """Provide image normalizer."""
        return PillowImageNormalizer()

    @provide
    def get_submission_service(
        self,
        comment_repository: CommentRepository,
        attachment_storage: AttachmentStorage,
        image_normalizer: ImageNormalizer,
        sanitizer: ContentSanitizer,
        settings: SubmissionSettings,
    ) -> SubmissionService:
        """Provide submission domain service."""
        return SubmissionService(
            comment_repository=comment_repository,
            attachment_storage=attachment_storage,
            image_normalizer=image_normalizer,
            sanitizer=sanitizer,
            settings=settings,
        )

    @provide
    def get_thread_service(
        self, comment_repository: CommentRepository, settings: ThreadSettings
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(comment_repository=comment_repository, settings=settings)
