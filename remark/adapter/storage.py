"""Attachment storage implementations."""

import asyncio
from pathlib import Path
from uuid import uuid4

import logfire

from remark.domain.error import AttachmentProcessingError
from remark.domain.repository import AttachmentStorage


def generate_filename(extension: str) -> str:
    """Build a collision-free filename keeping a safe extension.

    Args:
        extension: Original extension including the dot

    Returns:
        Random hex name plus the extension (dropped if not alphanumeric)
    """
    suffix = extension.lower()
    if not suffix[1:].isalnum() or len(suffix) > 10:
        suffix = ""
    return f"{uuid4().hex}{suffix}"


class LocalAttachmentStorage(AttachmentStorage):
    """Stores attachments as files in a local directory."""

    def __init__(self, directory: Path) -> None:
        """Initialize storage.

        Args:
            directory: Directory files are written to (created if missing)
        """
        self.directory = directory
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, filename: str) -> Path:
        # Only names we generated are ever resolved
        return self.directory / Path(filename).name

    async def save(self, content: bytes, extension: str) -> str:
        """Write a file under a generated name."""
        filename = generate_filename(extension)
        try:
            await asyncio.to_thread(self._path(filename).write_bytes, content)
        except OSError as e:
            logfire.error("Attachment write failed", filename=filename, error=str(e))
            raise AttachmentProcessingError(f"Failed to store attachment: {e}") from e
        return filename

    async def delete(self, filename: str) -> None:
        """Remove a file if present."""
        await asyncio.to_thread(self._path(filename).unlink, missing_ok=True)


class InMemoryAttachmentStorage(AttachmentStorage):
    """In-memory attachment storage for testing."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def save(self, content: bytes, extension: str) -> str:
        """Keep the bytes under a generated name."""
        filename = generate_filename(extension)
        self.files[filename] = content
        return filename

    async def delete(self, filename: str) -> None:
        """Forget a file."""
        self.files.pop(filename, None)
