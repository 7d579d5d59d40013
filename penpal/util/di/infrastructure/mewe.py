"""MeWe infrastructure providers."""

import logfire
from dishka import Scope, provide

from penpal.adapter.mewe import MeWeClient, RealMeWeClient
from penpal.config import MeWeSettings
from penpal.util.di.base import ProviderBase


class MeWeProvider(ProviderBase):
    """MeWe component base."""

    __mock_component__ = "mewe"


class ProdMeWeProvider(MeWeProvider):
    """Production MeWe provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mewe_client(self, mewe_settings: MeWeSettings) -> MeWeClient:
        """Provide MeWe API client.

        Missing credentials do not stop startup; every call then fails with
        ``RemoteServiceUnconfigured`` before reaching the network.
        """
        if not mewe_settings.is_configured:
            logfire.warn("MeWe credentials missing, linking is disabled")
        return RealMeWeClient(mewe_settings)
