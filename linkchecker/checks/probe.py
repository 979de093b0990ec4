"""
The link-check handler.

check_link() validates the URL, issues a HEAD request bounded by a total
timeout and classifies the outcome. It never raises: every fault becomes a
NetworkFailure (or InvalidInput when the URL is rejected up front).
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from linkchecker.checks.models import (
    CheckRequest,
    CheckResult,
    InvalidInput,
    NetworkFailure,
    classify_status,
)
from linkchecker.config.settings import ProbeSettings

logger = logging.getLogger(__name__)

# HEAD rejections that may be retried with GET when the fallback is enabled
FALLBACK_STATUSES = frozenset({405, 501})


def _validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0]["msg"]


def _failure_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


async def _probe(
    client: httpx.AsyncClient, url: str, settings: ProbeSettings
) -> tuple[int, str]:
    response = await client.head(url)
    if not (settings.get_fallback and response.status_code in FALLBACK_STATUSES):
        return response.status_code, response.reason_phrase

    logger.debug(f"HEAD {url} answered {response.status_code}, retrying with GET")
    # Streamed so the body is never downloaded
    async with client.stream("GET", url) as streamed:
        return streamed.status_code, streamed.reason_phrase


async def check_link(
    url: str,
    settings: ProbeSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CheckResult:
    """
    Check whether a URL is reachable.

    Args:
        url: The URL to probe
        settings: Probe configuration (timeout, redirects, fallback)
        transport: Optional httpx transport, used by tests to avoid the network

    Returns:
        Success, HttpError, NetworkFailure or InvalidInput
    """
    settings = settings or ProbeSettings()

    try:
        request = CheckRequest(url=url)
    except ValidationError as e:
        logger.debug(f"Rejected URL {url!r}: {e}")
        return InvalidInput(reason=_validation_message(e))

    target = str(request.url)
    try:
        async with httpx.AsyncClient(
            timeout=settings.timeout_s,
            follow_redirects=settings.follow_redirects,
            headers={"User-Agent": settings.user_agent},
            transport=transport,
        ) as client:
            status_code, status_text = await asyncio.wait_for(
                _probe(client, target, settings), timeout=settings.timeout_s
            )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.debug(f"Probe of {target} timed out")
        return NetworkFailure(error=f"Request timed out after {settings.timeout_s:g}s")
    except Exception as e:
        logger.debug(f"Probe of {target} failed: {e!r}")
        return NetworkFailure(error=_failure_message(e))

    logger.debug(f"Probe of {target} answered {status_code}")
    return classify_status(status_code, status_text)
