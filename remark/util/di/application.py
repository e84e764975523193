"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    GetCommentThreadUseCase,
    GetTopLevelCommentsUseCase,
    SubmitCommentUseCase,
)
from remark.config import StorageSettings
from remark.domain.service import SubmissionService, ThreadService
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, submission_service: SubmissionService
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_top_level_comments_use_case(
        self, thread_service: ThreadService, storage_settings: StorageSettings
    ) -> GetTopLevelCommentsUseCase:
        """Provide get top-level comments use case."""
        return GetTopLevelCommentsUseCase(
            thread_service=thread_service, storage_settings=storage_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self, thread_service: ThreadService, storage_settings: StorageSettings
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            thread_service=thread_service, storage_settings=storage_settings
        )
