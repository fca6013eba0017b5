"""Akismet comment-check client.

See https://akismet.com/developers/detailed-docs/comment-check/
"""

import httpx
import logfire

from margin.adapter.error import SpamCheckError
from margin.domain.service.moderation_service import SpamChecker
from margin.domain.value import SpamVerdict


class AkismetSpamChecker(SpamChecker):
    """Spam checker backed by the Akismet REST API."""

    def __init__(self, api_key: str, blog_url: str, timeout: float = 5.0) -> None:
        """Initialize Akismet client.

        Args:
            api_key: Akismet API key
            blog_url: Front page of the site the comments belong to
            timeout: Request timeout in seconds
        """
        self.blog_url = blog_url
        self.timeout = timeout
        self.check_url = f"https://{api_key}.rest.akismet.com/1.1/comment-check"

    async def check(
        self,
        author: str | None,
        email: str | None,
        ip: str | None,
        content: str,
    ) -> SpamVerdict:
        """Ask Akismet whether a comment is spam.

        Raises:
            SpamCheckError: On HTTP failure or an answer other than true/false
        """
        data = {
            "blog": self.blog_url,
            "user_ip": ip or "",
            "comment_type": "comment",
            "comment_author": author or "",
            "comment_author_email": email or "",
            "comment_content": content,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.check_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Akismet HTTP error", error=str(e))
            raise SpamCheckError(f"HTTP error during comment check: {e}")

        if response.status_code != 200:
            logfire.error(
                "Akismet comment check failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise SpamCheckError(f"Comment check failed: {response.status_code}")

        answer = response.text.strip()
        if answer == "true":
            return SpamVerdict.SPAM
        if answer == "false":
            return SpamVerdict.HAM

        debug_help = response.headers.get("X-akismet-debug-help", answer)
        logfire.error("Akismet returned an invalid answer", detail=debug_help)
        raise SpamCheckError(f"Invalid comment check answer: {debug_help}")


class DisabledSpamChecker(SpamChecker):
    """Used when no Akismet key is configured: everything is ham."""

    async def check(
        self,
        author: str | None,
        email: str | None,
        ip: str | None,
        content: str,
    ) -> SpamVerdict:
        return SpamVerdict.HAM


class MockSpamChecker(SpamChecker):
    """Scripted spam checker for testing.

    Answers with ``verdict`` and records every call. When ``fail`` is set
    it raises SpamCheckError instead.
    """

    def __init__(self, verdict: SpamVerdict = SpamVerdict.HAM, fail: bool = False):
        self.verdict = verdict
        self.fail = fail
        self.calls: list[dict[str, str | None]] = []

    async def check(
        self,
        author: str | None,
        email: str | None,
        ip: str | None,
        content: str,
    ) -> SpamVerdict:
        self.calls.append(
            {"author": author, "email": email, "ip": ip, "content": content}
        )
        if self.fail:
            raise SpamCheckError("Mock spam checker failure")
        return self.verdict
