"""HTTP request helper with bearer / basic auth and JSON or form bodies."""

from ._auth_helper import AuthHelper
from ._config import Config
from ._services import RequestBuilder
from ._utils import RequestSpec, build_url
from ._version import __version__
from .identity import (
    EnvironmentTokenProvider,
    IdentityProvider,
    Session,
    StaticTokenProvider,
)
from .models import (
    AuthHelperError,
    ContentType,
    Credentials,
    EncodingError,
    FormEncodingError,
    GenericResponse,
    JsonEncodingError,
    ResponseResult,
    TokenError,
    TokenExpiredError,
)

__all__ = [
    "__version__",
    "AuthHelper",
    "Config",
    "RequestBuilder",
    "RequestSpec",
    "build_url",
    "EnvironmentTokenProvider",
    "IdentityProvider",
    "Session",
    "StaticTokenProvider",
    "AuthHelperError",
    "ContentType",
    "Credentials",
    "EncodingError",
    "FormEncodingError",
    "GenericResponse",
    "JsonEncodingError",
    "ResponseResult",
    "TokenError",
    "TokenExpiredError",
]
