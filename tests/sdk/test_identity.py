import base64
import time

import pytest

from authhelper import (
    EnvironmentTokenProvider,
    IdentityProvider,
    Session,
    StaticTokenProvider,
    TokenExpiredError,
)


class TestStaticTokenProvider:
    @pytest.mark.anyio
    async def test_returns_token(self):
        provider = StaticTokenProvider("abc")

        session = provider.current_session()

        assert isinstance(provider, IdentityProvider)
        assert isinstance(session, Session)
        assert await session.get_token() == "abc"

    def test_signed_out(self):
        assert StaticTokenProvider(None).current_session() is None

    @pytest.mark.anyio
    async def test_signed_in_without_token(self):
        session = StaticTokenProvider(None, signed_in=True).current_session()

        assert session is not None
        assert await session.get_token() is None


class TestEnvironmentTokenProvider:
    def test_signed_out_when_variable_missing(self):
        assert EnvironmentTokenProvider().current_session() is None

    @pytest.mark.anyio
    async def test_opaque_token(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AUTHHELPER_ACCESS_TOKEN", "opaque-token")

        session = EnvironmentTokenProvider().current_session()

        assert session is not None
        assert await session.get_token() == "opaque-token"

    @pytest.mark.anyio
    async def test_reads_variable_on_each_call(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MY_TOKEN", "first")
        session = EnvironmentTokenProvider("MY_TOKEN").current_session()
        assert session is not None

        monkeypatch.setenv("MY_TOKEN", "second")

        assert await session.get_token() == "second"

    @pytest.mark.anyio
    async def test_valid_jwt(self, monkeypatch: pytest.MonkeyPatch, jwt_factory):
        token = jwt_factory({"sub": "user-1", "exp": time.time() + 3600})
        monkeypatch.setenv("AUTHHELPER_ACCESS_TOKEN", token)

        session = EnvironmentTokenProvider().current_session()

        assert session is not None
        assert await session.get_token() == token

    @pytest.mark.anyio
    async def test_non_object_payload_is_opaque(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        payload = base64.urlsafe_b64encode(b"[1]").decode("ascii").rstrip("=")
        token = f"header.{payload}.signature"
        monkeypatch.setenv("AUTHHELPER_ACCESS_TOKEN", token)

        session = EnvironmentTokenProvider().current_session()

        assert session is not None
        assert await session.get_token() == token

    @pytest.mark.anyio
    async def test_expired_jwt(self, monkeypatch: pytest.MonkeyPatch, jwt_factory):
        token = jwt_factory({"sub": "user-1", "exp": time.time() - 60})
        monkeypatch.setenv("AUTHHELPER_ACCESS_TOKEN", token)

        session = EnvironmentTokenProvider().current_session()
        assert session is not None

        with pytest.raises(TokenExpiredError, match="Access token for 'user-1' has expired"):
            await session.get_token()
