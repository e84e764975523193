"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from io import BytesIO

import logfire
import pytest
from PIL import Image

from remark.domain.model import Comment
from remark.domain.value import CommentId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_DATE = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    user_name: str = "alice",
    email: str = "alice@example.com",
    text: str = "Hello",
    minutes: int | None = None,
) -> Comment:
    """Helper to build a stored comment.

    Args:
        comment_id: ID to assign
        parent_id: Parent comment ID, None for top-level
        user_name: Author name
        email: Author email
        text: Comment text
        minutes: Creation time as minutes after BASE_DATE (defaults to the ID)

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        user_name=user_name,
        email=email,
        text=text,
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        date=BASE_DATE + timedelta(minutes=comment_id if minutes is None else minutes),
    )


def make_image(width: int, height: int, image_format: str = "PNG") -> bytes:
    """Helper to encode a solid-colour image.

    Args:
        width: Width in pixels
        height: Height in pixels
        image_format: Pillow format name (PNG, JPEG, GIF)

    Returns:
        Encoded image bytes
    """
    output = BytesIO()
    Image.new("RGB", (width, height), (200, 30, 60)).save(output, format=image_format)
    return output.getvalue()


@pytest.fixture
def png_640x480() -> bytes:
    """A PNG larger than the attachment bounds."""
    return make_image(640, 480)
