from ._auth import auth_headers, basic_auth, bearer_auth, mask_headers, parse_access_token
from ._encoding import encode_body, encode_form, encode_json
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs
from ._url import build_url, parse_url

__all__ = [
    "auth_headers",
    "basic_auth",
    "bearer_auth",
    "mask_headers",
    "parse_access_token",
    "encode_body",
    "encode_form",
    "encode_json",
    "setup_logging",
    "RequestSpec",
    "get_httpx_client_kwargs",
    "build_url",
    "parse_url",
]
