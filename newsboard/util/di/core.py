"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from newsboard.config import AuthSettings, Settings
from newsboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are passed in as container context, so the app and its
    dependencies share one instance.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
