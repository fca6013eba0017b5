"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Comment created", comment_id=comment.id, status=comment.status)

    with logfire.span("moderation.decide", ip=ip):
        ...

Author mail addresses and IPs show up in span attributes, so they are
scrubbed before anything leaves the process.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from margin.config import Settings
from margin.interface.api.request import client_ip


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE says
    so, or when OBSERVABILITY__LOGFIRE_TOKEN is set and the flag is unset.
    Console output is always on, verbose in debug mode.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="margin-backend",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(
            extra_patterns=settings.observability.scrub_pattern_list
        ),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        scrubbed=settings.observability.scrub_pattern_list,
    )


def _request_attributes(request: Request, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the page being served and the real client.

    Behind a proxy the socket peer is the proxy itself, so the forwarded
    address is recorded instead; it is the one rate limiting applies to.
    """
    result = {**attributes, "client_ip": client_ip(request)}
    path = request.query_params.get("path")
    if path:
        result["comment_path"] = path
    return result


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization carries bearer tokens
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outgoing Akismet calls."""
    logfire.instrument_httpx()
