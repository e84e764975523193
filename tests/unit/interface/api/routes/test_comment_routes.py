"""Unit tests for comment route helpers."""

from io import BytesIO

import pytest
from starlette.datastructures import Headers, UploadFile

from remark.interface.api.routes.comments import read_upload


def make_upload(content: bytes, filename: str | None = "notes.txt") -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": "text/plain"}),
    )


class TestReadUpload:
    """Tests for read_upload."""

    @pytest.mark.asyncio
    async def test_small_file_read_whole(self):
        attachment = await read_upload(make_upload(b"hello"), max_bytes=100)

        assert attachment is not None
        assert attachment.content == b"hello"
        assert attachment.filename == "notes.txt"
        assert attachment.content_type == "text/plain"

    @pytest.mark.asyncio
    async def test_oversized_file_read_one_byte_past_limit(self):
        """Reading stops just past the ceiling so the size check still fails."""
        # Arrange
        upload = make_upload(b"x" * 5_000)

        # Act
        attachment = await read_upload(upload, max_bytes=100)

        # Assert
        assert attachment.size == 101

    @pytest.mark.asyncio
    async def test_empty_file_field_is_ignored(self):
        assert await read_upload(make_upload(b"", filename=None), 100) is None
