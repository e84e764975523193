"""Comment thread domain service."""

import asyncio

import logfire

from remark.config import ThreadSettings
from remark.domain.error import (
    InvalidSortParameterError,
    NotFoundError,
    StoreError,
    ThreadTooDeepError,
)
from remark.domain.model import Comment, CommentNode
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, SortField, SortOrder


class ThreadService:
    """Domain service for reading comments as listings and reply trees."""

    def __init__(
        self, comment_repository: CommentRepository, settings: ThreadSettings
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            settings: Depth and timeout limits for thread assembly
        """
        self.comment_repository = comment_repository
        self.settings = settings

    async def get_top_level(
        self, sort_field: str = "date", sort_order: str = "desc"
    ) -> list[Comment]:
        """List comments that are not replies.

        Args:
            sort_field: One of userName, email, date
            sort_order: asc or desc

        Returns:
            Top-level comments without children, ties broken by ID ascending

        Raises:
            InvalidSortParameterError: If either parameter is not recognised.
                Raised before the store is queried.
        """
        try:
            field = SortField(sort_field)
        except ValueError:
            raise InvalidSortParameterError("sortBy", sort_field) from None
        try:
            order = SortOrder(sort_order)
        except ValueError:
            raise InvalidSortParameterError("sortOrder", sort_order) from None

        with logfire.span(
            "thread_service.get_top_level",
            sort_field=field.value,
            sort_order=order.value,
        ):
            comments = await self.comment_repository.find_top_level(field, order)
            logfire.info("Top-level comments retrieved", count=len(comments))
            return comments

    async def get_thread(self, comment_id: CommentId) -> CommentNode:
        """Build the full reply tree below a comment.

        Sibling subtrees are fetched concurrently; a node is complete only
        once all of its children are. Siblings are ordered by ID ascending.

        Args:
            comment_id: Root comment ID

        Returns:
            Root comment with all descendants attached

        Raises:
            NotFoundError: If the root comment does not exist
            StoreError: If any fetch fails, the tree is too deep, or assembly
                exceeds the configured timeout. No partial tree is returned.
        """
        with logfire.span("thread_service.get_thread", comment_id=comment_id):
            root = await self.comment_repository.find_by_id(comment_id)
            if root is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            try:
                async with asyncio.timeout(self.settings.timeout_seconds):
                    node = await self._assemble(root, ancestors=frozenset(), depth=0)
            except TimeoutError:
                logfire.error(
                    "Thread assembly timed out",
                    comment_id=comment_id,
                    timeout_seconds=self.settings.timeout_seconds,
                )
                raise StoreError(
                    f"Thread assembly for comment {comment_id} timed out"
                ) from None

            logfire.info(
                "Thread assembled", comment_id=comment_id, size=node.count()
            )
            return node

    async def _assemble(
        self, comment: Comment, ancestors: frozenset[CommentId], depth: int
    ) -> CommentNode:
        """Recursively attach replies to a comment."""
        if depth > self.settings.max_depth:
            raise ThreadTooDeepError(comment.id, self.settings.max_depth)

        lineage = ancestors | {comment.id}
        children = []
        for child in await self.comment_repository.find_children(comment.id):
            if child.id in lineage:
                # Reply chain loops back onto an ancestor
                logfire.warn(
                    "Skipping cyclic reply",
                    comment_id=child.id,
                    parent_comment_id=comment.id,
                )
                continue
            children.append(child)

        if not children:
            return CommentNode(comment=comment, children=[])

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._assemble(child, lineage, depth + 1))
                    for child in children
                ]
        except ExceptionGroup as failures:
            first = failures.exceptions[0]
            if isinstance(first, StoreError):
                raise first from None
            raise StoreError(
                f"Failed to assemble replies to comment {comment.id}"
            ) from first

        return CommentNode(comment=comment, children=[task.result() for task in tasks])
