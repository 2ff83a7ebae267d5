from logging import getLogger
from typing import Any, Mapping, Optional

from httpx import AsyncClient, Client, HTTPError, Response

from .._config import Config
from .._utils import (
    RequestSpec,
    auth_headers,
    build_url,
    encode_body,
    get_httpx_client_kwargs,
    mask_headers,
    parse_url,
)
from .._utils.constants import (
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    MESSAGE_INVALID_URL,
    MESSAGE_NO_TOKEN,
    MESSAGE_NOT_SIGNED_IN,
    MESSAGE_SUCCESS,
)
from ..identity import IdentityProvider
from ..models.credentials import Credentials
from ..models.errors import EncodingError
from ..models.response import ContentType, GenericResponse, ResponseResult


def _error_field(response: Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("error") or body.get("message") or body.get("detail")
    return message if isinstance(message, str) else None


def to_generic_response(response: Response) -> GenericResponse:
    """Map a received HTTP response to a GenericResponse."""
    if response.is_success:
        return GenericResponse(
            status=ResponseResult.OK,
            code=response.status_code,
            message=MESSAGE_SUCCESS,
            data=response.content,
        )

    status_code = response.status_code
    message = f"Request failed with code: {status_code}"
    if response.content:
        try:
            message = response.content.decode("utf-8")
        except UnicodeDecodeError:
            pass

    return GenericResponse.error(
        message, code=status_code, error_message=_error_field(response)
    )


def _wire_headers(headers: dict[str, str]) -> dict[str, bytes]:
    # httpx encodes str header values as ASCII; credentials may not be
    return {name: value.encode("utf-8") for name, value in headers.items()}


def transport_error_response(error: HTTPError) -> GenericResponse:
    return GenericResponse.error(f"Request failed: {error}")


class RequestBuilder:
    """Builds, sends and normalizes single-shot HTTP requests.

    Every public method resolves with a GenericResponse and never raises:
    invalid input, identity failures, HTTP errors and transport failures all
    come back as an ERROR response.

    Args:
        config: Client configuration.
        identity_provider: Source of bearer tokens for the ``authed_*`` methods.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        identity_provider: Optional[IdentityProvider] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        self._identity_provider = identity_provider
        self._client_kwargs = get_httpx_client_kwargs(
            follow_redirects=self._config.follow_redirects
        )

    @property
    def default_headers(self) -> dict[str, str]:
        return {HEADER_USER_AGENT: self._config.user_agent}

    def _prepare(
        self,
        endpoint: str,
        method: str,
        query_params: Optional[Mapping[str, str]],
        credentials: Optional[Credentials],
        body: Any = None,
        content_type: Optional[ContentType] = None,
    ) -> RequestSpec | GenericResponse:
        url = build_url(endpoint, query_params)
        if parse_url(url) is None:
            self._logger.debug(f"Rejecting invalid URL: {endpoint!r}")
            return GenericResponse.error(MESSAGE_INVALID_URL)

        headers = {**self.default_headers, **auth_headers(credentials)}
        content = None
        if content_type is not None:
            headers[HEADER_CONTENT_TYPE] = content_type.header_value
            try:
                content = encode_body(body, content_type)
            except EncodingError as e:
                self._logger.debug(f"Body encoding failed: {e.message}")
                return GenericResponse.error(e.response_message)

        return RequestSpec(
            method=method.upper(),
            endpoint=url,
            headers=headers,
            content=content,
            content_type=content_type,
        )

    def _log_request(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.endpoint}")
        self._logger.debug(f"HEADERS: {mask_headers(spec.headers)}")
        if spec.content_type is not None:
            self._logger.debug(
                f"BODY: {spec.content_type.value}, {len(spec.content or b'')} bytes"
            )

    def _send(self, spec: RequestSpec) -> GenericResponse:
        self._log_request(spec)
        try:
            with Client(**self._client_kwargs) as client:
                response = client.request(
                    spec.method,
                    spec.endpoint,
                    headers=_wire_headers(spec.headers),
                    content=spec.content,
                )
        except HTTPError as e:
            self._logger.warning(f"{spec.method} {spec.endpoint} failed: {e}")
            return transport_error_response(e)

        self._logger.debug(f"Response: {response.status_code} {spec.endpoint}")
        return to_generic_response(response)

    async def _send_async(self, spec: RequestSpec) -> GenericResponse:
        self._log_request(spec)
        try:
            async with AsyncClient(**self._client_kwargs) as client:
                response = await client.request(
                    spec.method,
                    spec.endpoint,
                    headers=_wire_headers(spec.headers),
                    content=spec.content,
                )
        except HTTPError as e:
            self._logger.warning(f"{spec.method} {spec.endpoint} failed: {e}")
            return transport_error_response(e)

        self._logger.debug(f"Response: {response.status_code} {spec.endpoint}")
        return to_generic_response(response)

    def plain_request(
        self,
        endpoint: str,
        method: str = "GET",
        query_params: Optional[Mapping[str, str]] = None,
        credentials: Optional[Credentials] = None,
    ) -> GenericResponse:
        """Send a request without a body.

        Args:
            endpoint: Absolute http(s) URL.
            method: HTTP method.
            query_params: Replaces the endpoint's query string when given.
            credentials: Bearer token or basic-auth pair.

        Returns:
            GenericResponse: The normalized outcome.
        """
        spec = self._prepare(endpoint, method, query_params, credentials)
        if isinstance(spec, GenericResponse):
            return spec
        return self._send(spec)

    async def plain_request_async(
        self,
        endpoint: str,
        method: str = "GET",
        query_params: Optional[Mapping[str, str]] = None,
        credentials: Optional[Credentials] = None,
    ) -> GenericResponse:
        spec = self._prepare(endpoint, method, query_params, credentials)
        if isinstance(spec, GenericResponse):
            return spec
        return await self._send_async(spec)

    def body_request(
        self,
        endpoint: str,
        body: Any,
        content_type: ContentType,
        method: str = "POST",
        query_params: Optional[Mapping[str, str]] = None,
        credentials: Optional[Credentials] = None,
    ) -> GenericResponse:
        """Send a request with an encoded body.

        ``content_type`` selects both the Content-Type header and the
        encoding. Form bodies must serialize to a flat JSON object; anything
        else short-circuits with an ERROR response and nothing is sent.

        Args:
            endpoint: Absolute http(s) URL.
            body: Pydantic model, dataclass, mapping or other JSON-able value.
            content_type: ``ContentType.JSON`` or ``ContentType.FORM``.
            method: HTTP method.
            query_params: Replaces the endpoint's query string when given.
            credentials: Bearer token or basic-auth pair.

        Returns:
            GenericResponse: The normalized outcome.
        """
        spec = self._prepare(
            endpoint, method, query_params, credentials, body, content_type
        )
        if isinstance(spec, GenericResponse):
            return spec
        return self._send(spec)

    async def body_request_async(
        self,
        endpoint: str,
        body: Any,
        content_type: ContentType,
        method: str = "POST",
        query_params: Optional[Mapping[str, str]] = None,
        credentials: Optional[Credentials] = None,
    ) -> GenericResponse:
        spec = self._prepare(
            endpoint, method, query_params, credentials, body, content_type
        )
        if isinstance(spec, GenericResponse):
            return spec
        return await self._send_async(spec)

    async def _fetch_token(self) -> str | GenericResponse:
        session = (
            self._identity_provider.current_session()
            if self._identity_provider is not None
            else None
        )
        if session is None:
            return GenericResponse.error(MESSAGE_NOT_SIGNED_IN, code=401)

        try:
            token = await session.get_token()
        except Exception as e:
            self._logger.warning(f"Token retrieval failed: {e}")
            return GenericResponse.error(str(e))

        if not token:
            return GenericResponse.error(MESSAGE_NO_TOKEN, code=401)
        return token

    async def authed_plain_request(
        self,
        endpoint: str,
        method: str = "GET",
        query_params: Optional[Mapping[str, str]] = None,
    ) -> GenericResponse:
        """Send a bodiless request authenticated with a fresh bearer token."""
        token = await self._fetch_token()
        if isinstance(token, GenericResponse):
            return token
        return await self.plain_request_async(
            build_url(endpoint, query_params),
            method,
            credentials=Credentials(token=token),
        )

    async def authed_body_request(
        self,
        endpoint: str,
        method: str,
        body: Any,
        content_type: ContentType,
        query_params: Optional[Mapping[str, str]] = None,
    ) -> GenericResponse:
        """Send a request with a body, authenticated with a fresh bearer token."""
        token = await self._fetch_token()
        if isinstance(token, GenericResponse):
            return token
        return await self.body_request_async(
            endpoint,
            body,
            content_type,
            method,
            query_params=query_params,
            credentials=Credentials(token=token),
        )
