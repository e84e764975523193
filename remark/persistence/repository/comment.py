"""SQL implementation of Comment repository."""

import asyncio
from typing import List, Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import StoreError
from remark.domain.model import Comment, NewComment
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, SortField, SortOrder
from remark.persistence.mappers import new_comment_to_dict, row_to_comment
from remark.persistence.tables import comments_table

SORT_COLUMNS = {
    SortField.USER_NAME: comments_table.c.user_name,
    SortField.EMAIL: comments_table.c.email,
    SortField.DATE: comments_table.c.date,
}


class PostgresCommentRepository(CommentRepository):
    """SQLAlchemy implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        # An AsyncSession runs one statement at a time
        self._lock = asyncio.Lock()

    async def _fetch_all(self, stmt) -> List[Comment]:
        try:
            async with self._lock:
                result = await self.session.execute(stmt)
                rows = result.fetchall()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load comments: {e}") from e
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        comments = await self._fetch_all(stmt)
        return comments[0] if comments else None

    async def find_top_level(
        self,
        sort_field: SortField = SortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> List[Comment]:
        """Find comments without a parent."""
        direction = desc if sort_order == SortOrder.DESC else asc
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.is_(None))
            .order_by(direction(SORT_COLUMNS[sort_field]), comments_table.c.id)
        )
        return await self._fetch_all(stmt)

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id == parent_id)
            .order_by(comments_table.c.id)
        )
        return await self._fetch_all(stmt)

    async def add(self, comment: NewComment) -> Comment:
        """Insert and commit a comment, returning it with ID and date."""
        stmt = (
            comments_table.insert()
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        try:
            async with self._lock:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                # Committed here so a failure reaches the caller before a response
                await self.session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to insert comment: {e}") from e

        if row is None:
            raise StoreError("Insert returned no row")
        return row_to_comment(row._asdict())
