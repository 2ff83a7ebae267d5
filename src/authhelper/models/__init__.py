"""Models shared by the request builder and identity providers."""

from .credentials import Credentials
from .errors import (
    AuthHelperError,
    EncodingError,
    FormEncodingError,
    JsonEncodingError,
    TokenError,
    TokenExpiredError,
)
from .response import ContentType, GenericResponse, ResponseResult

__all__ = [
    "Credentials",
    "AuthHelperError",
    "EncodingError",
    "FormEncodingError",
    "JsonEncodingError",
    "TokenError",
    "TokenExpiredError",
    "ContentType",
    "GenericResponse",
    "ResponseResult",
]
