import time
from logging import getLogger
from os import environ as env
from typing import Optional

from .._utils._auth import parse_access_token
from .._utils.constants import ENV_ACCESS_TOKEN, LOGGER_NAME
from ..models.errors import TokenExpiredError

logger = getLogger(LOGGER_NAME)


class _StaticSession:
    def __init__(self, token: Optional[str]) -> None:
        self._token = token

    async def get_token(self) -> Optional[str]:
        return self._token


class StaticTokenProvider:
    """Identity provider backed by a fixed token.

    Passing ``None`` models a signed-out user: ``current_session()`` returns
    None. ``signed_in=True`` with no token models a provider that has a
    session but issues no token.
    """

    def __init__(self, token: Optional[str], *, signed_in: Optional[bool] = None):
        self._token = token
        self._signed_in = token is not None if signed_in is None else signed_in

    def current_session(self) -> Optional[_StaticSession]:
        if not self._signed_in:
            return None
        return _StaticSession(self._token)


class _EnvironmentSession:
    def __init__(self, variable: str) -> None:
        self._variable = variable

    async def get_token(self) -> Optional[str]:
        token = env.get(self._variable)
        if not token:
            return None

        try:
            claims = parse_access_token(token)
        except ValueError:
            # opaque token, nothing to inspect
            return token

        if not isinstance(claims, dict):
            return token

        subject = claims.get("sub") or claims.get("email")
        expires_at = claims.get("exp")
        if isinstance(expires_at, (int, float)) and expires_at <= time.time():
            raise TokenExpiredError(subject)

        logger.debug(f"Using access token for subject {subject!r}")
        return token


class EnvironmentTokenProvider:
    """Identity provider reading the token from an environment variable.

    The variable is read on every ``get_token()`` call so a refreshed token is
    picked up without rebuilding the provider. JWTs are decoded, without
    verification, to reject tokens that have already expired.
    """

    def __init__(self, variable: str = ENV_ACCESS_TOKEN) -> None:
        self._variable = variable

    def current_session(self) -> Optional[_EnvironmentSession]:
        if not env.get(self._variable):
            return None
        return _EnvironmentSession(self._variable)
