"""Attachment storage interface."""

from abc import ABC, abstractmethod


class AttachmentStorage(ABC):
    """Storage for files attached to comments.

    Files are keyed by a generated, collision-free name that keeps the
    original extension.
    """

    @abstractmethod
    async def save(self, content: bytes, extension: str) -> str:
        """Store a file.

        Args:
            content: File bytes, already normalized
            extension: Extension including the dot (e.g. ".png"), may be empty

        Returns:
            Generated filename the file is stored under
        """
        pass

    @abstractmethod
    async def delete(self, filename: str) -> None:
        """Remove a stored file. Missing files are ignored.

        Args:
            filename: Name returned by save()
        """
        pass
