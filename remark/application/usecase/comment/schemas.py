"""Comment representations returned by the use cases."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from remark.domain.model import Comment, CommentNode


class CommentItem(BaseModel):
    """Comment as presented to clients. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    user_name: str
    email: str
    home_page: str | None
    text: str
    parent_comment_id: int | None
    date: datetime
    attachment: str | None  # URL of the stored file

    @classmethod
    def from_domain(cls, comment: Comment, url_prefix: str) -> "CommentItem":
        """Convert a domain comment to its presentation.

        Args:
            comment: Domain comment
            url_prefix: URL prefix stored attachments are served under

        Returns:
            Response item
        """
        return cls(
            id=comment.id,
            user_name=comment.user_name,
            email=comment.email,
            home_page=comment.home_page,
            text=comment.text,
            parent_comment_id=comment.parent_comment_id,
            date=comment.date,
            attachment=(
                f"{url_prefix.rstrip('/')}/{comment.attachment}"
                if comment.attachment
                else None
            ),
        )


class CommentThreadItem(CommentItem):
    """Comment with its replies, recursively."""

    children: list["CommentThreadItem"]

    @classmethod
    def from_node(cls, node: CommentNode, url_prefix: str) -> "CommentThreadItem":
        """Convert a domain CommentNode to a response model.

        Args:
            node: Domain comment node
            url_prefix: URL prefix stored attachments are served under

        Returns:
            Response model with children recursively converted
        """
        item = CommentItem.from_domain(node.comment, url_prefix)
        return cls(
            **item.model_dump(),
            children=[cls.from_node(child, url_prefix) for child in node.children],
        )
