"""Get comment thread use case."""

from pydantic import BaseModel

from remark.config import StorageSettings
from remark.domain.service import ThreadService
from remark.domain.value import CommentId

from .schemas import CommentThreadItem


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    comment_id: int


class GetCommentThreadUseCase:
    """Use case for reading a comment together with all of its replies."""

    def __init__(
        self, thread_service: ThreadService, storage_settings: StorageSettings
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            thread_service: Thread domain service
            storage_settings: Used to build attachment URLs
        """
        self.thread_service = thread_service
        self.storage_settings = storage_settings

    async def execute(self, request: GetCommentThreadRequest) -> CommentThreadItem:
        """Execute get comment thread flow.

        Args:
            request: Root comment ID

        Returns:
            Root comment with nested children

        Raises:
            NotFoundError: If the comment does not exist
            StoreError: If the tree cannot be assembled
        """
        node = await self.thread_service.get_thread(CommentId(request.comment_id))
        return CommentThreadItem.from_node(node, self.storage_settings.url_prefix)
