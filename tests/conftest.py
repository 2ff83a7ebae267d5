import base64
import json
import sys
from pathlib import Path

import pytest

# Ensure local source package (src/authhelper) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from authhelper import Config, RequestBuilder, StaticTokenProvider  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("AUTHHELPER_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("AUTHHELPER_DEBUG", raising=False)


@pytest.fixture
def endpoint() -> str:
    return "https://api.example.com/v1/items"


@pytest.fixture
def token() -> str:
    return "abc"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def builder(config: Config, token: str) -> RequestBuilder:
    return RequestBuilder(config, identity_provider=StaticTokenProvider(token))


def make_jwt(claims: dict) -> str:
    def _segment(value: dict) -> str:
        raw = json.dumps(value).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    return f"{_segment({'alg': 'none', 'typ': 'JWT'})}.{_segment(claims)}.signature"


@pytest.fixture
def jwt_factory():
    return make_jwt
