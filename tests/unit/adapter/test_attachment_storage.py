"""Unit tests for attachment storage."""

import pytest

from remark.adapter.storage import LocalAttachmentStorage, generate_filename


class TestGenerateFilename:
    """Tests for generate_filename."""

    def test_keeps_lowercased_extension(self):
        filename = generate_filename(".PNG")

        assert filename.endswith(".png")
        assert len(filename) == 32 + 4

    def test_names_are_unique(self):
        assert generate_filename(".txt") != generate_filename(".txt")

    @pytest.mark.parametrize("extension", ["", ".", "./../x", ".tar.gz", ".abcdefghijk"])
    def test_unsafe_extension_is_dropped(self, extension):
        filename = generate_filename(extension)

        assert filename.isalnum()
        assert len(filename) == 32


class TestLocalAttachmentStorage:
    """Tests for LocalAttachmentStorage."""

    @pytest.mark.asyncio
    async def test_save_writes_file(self, tmp_path):
        # Arrange
        storage = LocalAttachmentStorage(tmp_path / "uploads")

        # Act
        filename = await storage.save(b"hello", ".txt")

        # Assert
        assert (tmp_path / "uploads" / filename).read_bytes() == b"hello"

    @pytest.mark.asyncio
    async def test_delete_removes_file(self, tmp_path):
        storage = LocalAttachmentStorage(tmp_path)
        filename = await storage.save(b"bye", ".txt")

        await storage.delete(filename)

        assert not (tmp_path / filename).exists()

    @pytest.mark.asyncio
    async def test_delete_missing_file_is_a_no_op(self, tmp_path):
        storage = LocalAttachmentStorage(tmp_path)

        await storage.delete("does-not-exist.txt")

    @pytest.mark.asyncio
    async def test_paths_cannot_escape_directory(self, tmp_path):
        """Lookups only ever resolve inside the storage directory."""
        inner = tmp_path / "uploads"
        storage = LocalAttachmentStorage(inner)
        (tmp_path / "secret.txt").write_bytes(b"secret")

        await storage.delete("../secret.txt")
        assert (tmp_path / "secret.txt").exists()
