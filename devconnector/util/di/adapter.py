"""Adapter DI providers."""

from dishka import Scope, provide

from devconnector.adapter.password import Argon2PasswordHasher
from devconnector.domain.service import PasswordHasher
from devconnector.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Adapters without external side effects - concrete, no mocks needed."""

    scope = Scope.APP

    @provide
    def get_password_hasher(self) -> PasswordHasher:
        """Provide argon2 password hasher."""
        return Argon2PasswordHasher()
