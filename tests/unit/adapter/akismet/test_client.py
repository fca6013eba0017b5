"""Unit tests for the Akismet spam checker."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from margin.adapter.akismet import AkismetSpamChecker, DisabledSpamChecker
from margin.adapter.error import SpamCheckError
from margin.domain.value import SpamVerdict


def mock_response(text: str, status_code: int = 200, headers: dict | None = None):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.headers = headers or {}
    return response


async def check(checker: AkismetSpamChecker):
    return await checker.check("bob", "bob@example.com", "1.2.3.4", "Nice post")


class TestAkismetSpamChecker:
    """Tests for AkismetSpamChecker.check()."""

    @pytest.mark.asyncio
    async def test_false_answer_is_ham(self):
        checker = AkismetSpamChecker("key123", "https://blog.example.com")

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=mock_response("false"))
            mock_client.return_value.__aenter__.return_value.post = post

            verdict = await check(checker)

        assert verdict is SpamVerdict.HAM
        url = post.call_args.args[0]
        data = post.call_args.kwargs["data"]
        assert url == "https://key123.rest.akismet.com/1.1/comment-check"
        assert data["blog"] == "https://blog.example.com"
        assert data["user_ip"] == "1.2.3.4"
        assert data["comment_author"] == "bob"
        assert data["comment_author_email"] == "bob@example.com"
        assert data["comment_content"] == "Nice post"

    @pytest.mark.asyncio
    async def test_true_answer_is_spam(self):
        checker = AkismetSpamChecker("key123", "https://blog.example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response("true")
            )

            assert await check(checker) is SpamVerdict.SPAM

    @pytest.mark.asyncio
    async def test_invalid_answer_raises(self):
        checker = AkismetSpamChecker("badkey", "https://blog.example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response(
                    "invalid", headers={"X-akismet-debug-help": "Bad key"}
                )
            )

            with pytest.raises(SpamCheckError, match="Bad key"):
                await check(checker)

    @pytest.mark.asyncio
    async def test_http_status_error_raises(self):
        checker = AkismetSpamChecker("key123", "https://blog.example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response("oops", status_code=503)
            )

            with pytest.raises(SpamCheckError):
                await check(checker)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        checker = AkismetSpamChecker("key123", "https://blog.example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectTimeout("timed out")
            )

            with pytest.raises(SpamCheckError):
                await check(checker)


class TestDisabledSpamChecker:
    @pytest.mark.asyncio
    async def test_everything_is_ham(self):
        verdict = await DisabledSpamChecker().check(None, None, None, "buy now")

        assert verdict is SpamVerdict.HAM
