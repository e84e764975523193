"""Get top-level comments use case."""

from pydantic import BaseModel

from remark.config import StorageSettings
from remark.domain.service import ThreadService

from .schemas import CommentItem


class GetTopLevelCommentsRequest(BaseModel):
    """Get top-level comments request."""

    sort_by: str = "date"
    sort_order: str = "desc"


class GetTopLevelCommentsUseCase:
    """Use case for listing comments that are not replies."""

    def __init__(
        self, thread_service: ThreadService, storage_settings: StorageSettings
    ) -> None:
        self.thread_service = thread_service
        self.storage_settings = storage_settings

    async def execute(self, request: GetTopLevelCommentsRequest) -> list[CommentItem]:
        """List top-level comments in the requested order.

        Raises:
            InvalidSortParameterError: If the sort field or order is unknown
        """
        comments = await self.thread_service.get_top_level(
            request.sort_by, request.sort_order
        )
        return [
            CommentItem.from_domain(comment, self.storage_settings.url_prefix)
            for comment in comments
        ]
