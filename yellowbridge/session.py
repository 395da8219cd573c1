"""Session acquisition: one landing-page GET that yields a reusable cookie."""

from __future__ import annotations

import httpx
from loguru import logger

from yellowbridge.config import settings
from yellowbridge.errors import SessionError, map_error
from yellowbridge.models import YbHeaders


async def _get_yellowbridge_cookie() -> str:
    """Return the ``name=value`` part of the first ``Set-Cookie`` header."""
    try:
        async with httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = await client.get(settings.landing_url)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        raise map_error(exc, SessionError) from exc

    cookies = response.headers.get_list("set-cookie")
    cookie = cookies[0].split(";")[0].strip() if cookies else ""
    if not cookie:
        raise SessionError("No YellowBridge cookie")
    return cookie


async def get_yellowbridge_headers() -> YbHeaders:
    """Fetch a fresh session and return headers for authorised traversal.

    Reuse the result across calls; every call costs one network round trip.

    Raises:
        SessionError: If the landing page cannot be fetched or sets no cookie.
    """
    cookie = await _get_yellowbridge_cookie()
    logger.debug("Acquired YellowBridge session cookie {}", cookie.split("=")[0])
    return YbHeaders(referer=settings.landing_url, cookie=cookie)
