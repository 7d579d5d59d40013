"""Infrastructure providers."""

# Import bases
from .mewe import MeWeProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .mewe import ProdMeWeProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "MeWeProvider",
    "PersistenceProvider",
    "ProdMeWeProvider",
    "ProdPersistenceProvider",
]
