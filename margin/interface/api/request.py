"""Helpers reading credentials and client identity off a request."""

from fastapi import Request

_BEARER = "bearer "


def extract_token(request: Request) -> str | None:
    """Bearer token from the Authorization header, if any."""
    header = request.headers.get("authorization", "")
    if header[: len(_BEARER)].lower() != _BEARER:
        return None
    token = header[len(_BEARER) :].strip()
    return token or None


def client_ip(request: Request) -> str:
    """Client address, honouring reverse proxy headers.

    The first address of X-Forwarded-For wins, then X-Real-IP, then the
    socket peer.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else ""
