"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from remark.domain.model.comment import Comment, NewComment
from remark.domain.value import CommentId, SortField, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise StoreError
    when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        sort_field: SortField = SortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> List[Comment]:
        """Find comments without a parent.

        Ties on the sort field are broken by ID ascending.

        Args:
            sort_field: Field to order by
            sort_order: Direction to order in

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, ordered by ID ascending.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments (empty for a leaf)
        """
        pass

    @abstractmethod
    async def add(self, comment: NewComment) -> Comment:
        """Insert a comment atomically.

        Either the whole record lands or nothing does.

        Args:
            comment: The sanitized comment to insert

        Returns:
            The stored comment with ID and date assigned
        """
        pass
