"""
Tests for auth sources and token providers.
"""

import logging

import pytest

from api_client_manager.auth import (
    EMPTY_TOKEN,
    AuthenticationError,
    AuthSource,
    CallableTokenSource,
    StaticTokenSource,
    TokenResult,
    build_token_provider,
    fetch_token,
)


class FailingSource:
    """Auth source whose token lookup always fails."""

    def __init__(self):
        self.calls = 0

    async def get_latest_auth_token(self):
        self.calls += 1
        raise RuntimeError("refresh token expired")


class TestAuthSources:
    """Test ready-made auth sources."""

    def test_static_source_is_auth_source(self):
        assert isinstance(StaticTokenSource("token"), AuthSource)

    def test_static_source_returns_token(self):
        assert StaticTokenSource("token").get_latest_auth_token() == "token"

    def test_static_source_requires_token(self):
        with pytest.raises(AuthenticationError):
            StaticTokenSource("").get_latest_auth_token()

    @pytest.mark.asyncio
    async def test_callable_source_sync(self):
        source = CallableTokenSource(lambda: "sync-token")

        assert (await fetch_token(source)).token == "sync-token"

    @pytest.mark.asyncio
    async def test_callable_source_async(self):
        async def latest_token():
            return "async-token"

        source = CallableTokenSource(latest_token)

        assert (await fetch_token(source)).token == "async-token"


class TestFetchToken:
    """Test token lookups."""

    @pytest.mark.asyncio
    async def test_success(self):
        result = await fetch_token(StaticTokenSource("token"))

        assert result == TokenResult(success=True, token="token")

    @pytest.mark.asyncio
    async def test_async_failure(self):
        result = await fetch_token(FailingSource())

        assert result.success is False
        assert result.token == EMPTY_TOKEN
        assert "refresh token expired" in result.error

    @pytest.mark.asyncio
    async def test_sync_failure(self):
        result = await fetch_token(StaticTokenSource(""))

        assert result.success is False
        assert "AuthenticationError" in result.error

    @pytest.mark.asyncio
    async def test_non_string_token(self):
        result = await fetch_token(CallableTokenSource(lambda: None))

        assert result.success is False
        assert "NoneType" in result.error


class TestTokenProvider:
    """Test token providers handed to clients."""

    @pytest.mark.asyncio
    async def test_returns_latest_token(self):
        tokens = iter(["first", "second"])
        provider = build_token_provider(CallableTokenSource(lambda: next(tokens)))

        assert await provider() == "first"
        assert await provider() == "second"

    @pytest.mark.asyncio
    async def test_failure_yields_empty_token(self, caplog):
        source = FailingSource()
        provider = build_token_provider(source)

        with caplog.at_level(logging.WARNING, logger="api_client_manager.auth.base"):
            token = await provider()

        assert token == EMPTY_TOKEN
        assert source.calls == 1
        assert "Auth token retrieval failed" in caplog.text

    @pytest.mark.asyncio
    async def test_provider_queries_source_each_time(self):
        source = FailingSource()
        provider = build_token_provider(source)

        await provider()
        await provider()

        assert source.calls == 2
