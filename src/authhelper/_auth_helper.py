from logging import getLogger
from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import RequestBuilder
from ._utils import setup_logging
from ._utils.constants import ENV_DEBUG, LOGGER_NAME
from .identity import EnvironmentTokenProvider, IdentityProvider

load_dotenv()


def _env_flag(name: str) -> bool:
    return env.get(name, "").strip().lower() in ("1", "true", "yes", "on")


class AuthHelper:
    """Entry point wiring configuration, logging and identity together.

    Without an explicit ``identity_provider`` the bearer token for authed
    requests is read from ``AUTHHELPER_ACCESS_TOKEN``.
    """

    def __init__(
        self,
        *,
        identity_provider: Optional[IdentityProvider] = None,
        debug: Optional[bool] = None,
        follow_redirects: bool = True,
    ) -> None:
        self._config = Config(
            debug=_env_flag(ENV_DEBUG) if debug is None else debug,
            follow_redirects=follow_redirects,
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)
        log.debug(f"CONFIG: {self._config.model_dump()}")

        self._identity_provider = identity_provider or EnvironmentTokenProvider()
        self._requests = RequestBuilder(self._config, self._identity_provider)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def requests(self) -> RequestBuilder:
        return self._requests
