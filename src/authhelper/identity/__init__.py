"""Identity providers supplying bearer tokens to authed requests."""

from ._protocol import IdentityProvider, Session
from ._providers import EnvironmentTokenProvider, StaticTokenProvider

__all__ = [
    "IdentityProvider",
    "Session",
    "EnvironmentTokenProvider",
    "StaticTokenProvider",
]
