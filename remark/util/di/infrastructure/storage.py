"""Attachment storage infrastructure providers."""

from dishka import Scope, provide

from remark.adapter.storage import LocalAttachmentStorage
from remark.config import StorageSettings
from remark.domain.repository import AttachmentStorage
from remark.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Attachment storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_attachment_storage(self, settings: StorageSettings) -> AttachmentStorage:
        """Provide local attachment storage."""
        return LocalAttachmentStorage(settings.directory)
