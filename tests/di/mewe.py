"""Mock MeWe providers for testing."""

from dishka import Scope, provide

from penpal.adapter.mewe import MeWeClient, MockMeWeClient
from penpal.util.di.infrastructure.mewe import MeWeProvider


class MockMeWeProvider(MeWeProvider):
    """Mock MeWe provider using the scriptable mock client.

    The same client instance is exposed under its concrete type so tests can
    script responses and inspect recorded calls.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_mewe_client(self) -> MockMeWeClient:
        """Provide the shared mock MeWe client."""
        return MockMeWeClient()

    @provide(scope=Scope.APP)
    def get_mewe_client(self, client: MockMeWeClient) -> MeWeClient:
        """Provide the mock client as the MeWe client."""
        return client
