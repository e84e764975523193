"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from remark.config import Settings, StorageSettings, SubmissionSettings, ThreadSettings
from remark.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_submission_settings(self, settings: Settings) -> SubmissionSettings:
        """Provide submission settings."""
        return settings.submission

    @provide(scope=Scope.APP)
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        """Provide thread settings."""
        return settings.thread

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage
