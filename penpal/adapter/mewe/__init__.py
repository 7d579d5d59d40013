"""MeWe adapter."""

from .client import (
    MeWeClient,
    MockMeWeClient,
    RealMeWeClient,
)

__all__ = ["MeWeClient", "RealMeWeClient", "MockMeWeClient"]
