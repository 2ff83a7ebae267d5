from typing import Optional

from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """Credentials attached to a single request.

    A non-empty ``token`` is sent as a bearer token. Otherwise a non-empty
    ``username`` and ``password`` pair is sent as HTTP basic auth. Empty
    strings count as absent.
    """

    model_config = ConfigDict(frozen=True)

    token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def has_basic(self) -> bool:
        return bool(self.username) and bool(self.password)

    def __repr__(self) -> str:
        """Override repr to prevent accidental secret exposure in logs."""
        return (
            f"Credentials(token={'***' if self.token else None!r}, "
            f"username={self.username!r}, "
            f"password={'***' if self.password else None!r})"
        )

    __str__ = __repr__
