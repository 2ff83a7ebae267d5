import base64
import json
from typing import Any, Optional

from ..models.credentials import Credentials
from .constants import HEADER_AUTHORIZATION


def basic_auth(user: str, password: str) -> str:
    credentials = base64.b64encode(f"{user}:{password}".encode("utf-8"))
    return f"Basic {credentials.decode('ascii')}"


def bearer_auth(token: str) -> str:
    return f"Bearer {token}"


def auth_headers(credentials: Optional[Credentials]) -> dict[str, str]:
    """Build the Authorization header for ``credentials``, bearer first."""
    if credentials is None:
        return {}
    if credentials.has_token:
        return {HEADER_AUTHORIZATION: bearer_auth(credentials.token)}  # type: ignore[arg-type]
    if credentials.has_basic:
        return {
            HEADER_AUTHORIZATION: basic_auth(
                credentials.username,  # type: ignore[arg-type]
                credentials.password,  # type: ignore[arg-type]
            )
        }
    return {}


def mask_headers(headers: dict[str, str]) -> dict[str, str]:
    """Copy of ``headers`` safe to log."""
    masked = dict(headers)
    for key in masked:
        if key.lower() == HEADER_AUTHORIZATION.lower():
            scheme = masked[key].split(" ", 1)[0]
            masked[key] = f"{scheme} ***"
    return masked


def parse_access_token(access_token: str) -> dict[str, Any]:
    """Decode the payload of a JWT without verifying its signature."""
    token_parts = access_token.split(".")
    if len(token_parts) < 2:
        raise ValueError("Invalid access token")
    payload = base64.urlsafe_b64decode(
        token_parts[1] + "=" * (-len(token_parts[1]) % 4)
    )
    return json.loads(payload)
