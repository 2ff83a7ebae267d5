from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Session(Protocol):
    """A signed-in identity able to mint short-lived bearer tokens."""

    async def get_token(self) -> Optional[str]:
        """Return a fresh token, or None if the provider issued none.

        Implementations raise to report a failure; the exception text is
        surfaced to the caller as the response message.
        """
        ...


@runtime_checkable
class IdentityProvider(Protocol):
    def current_session(self) -> Optional[Session]: ...
