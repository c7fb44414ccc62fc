"""Password hashing infrastructure providers."""

from dishka import Scope, provide

from newsboard.adapter.password import BcryptPasswordHasher
from newsboard.config import AuthSettings
from newsboard.domain.service import PasswordHasher
from newsboard.util.di.base import ProviderBase


class PasswordProvider(ProviderBase):
    """Password hashing component base."""

    __mock_component__ = "password"


class ProdPasswordProvider(PasswordProvider):
    """Production password hasher using bcrypt."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return BcryptPasswordHasher(auth_settings)
