"""Authenticated page fetching behind a pluggable :class:`PageSource`."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

import httpx
from loguru import logger

from yellowbridge.config import settings
from yellowbridge.errors import FetchError, YellowBridgeError, map_error
from yellowbridge.models import YbHeaders
from yellowbridge.session import get_yellowbridge_headers


class PageSource(Protocol):
    """Anything that can turn a URL plus request headers into HTML text."""

    async def fetch(self, url: str, headers: Dict[str, str]) -> str: ...


class HttpxPageSource:
    """Default :class:`PageSource` backed by a short-lived ``httpx.AsyncClient``.

    Raises ``httpx.HTTPStatusError`` for 4xx/5xx responses.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = settings.request_timeout if timeout is None else timeout

    async def fetch(self, url: str, headers: Dict[str, str]) -> str:
        async with httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.text


async def fetch_page(
    url: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> str:
    """GET *url* with the session's ``Referer`` and ``Cookie`` and return the HTML.

    Acquires a new session first when *headers* is omitted.

    Raises:
        SessionError: If a session had to be acquired and that failed.
        FetchError: On any transport or HTTP status failure.
    """
    if headers is None:
        headers = await get_yellowbridge_headers()
    source = source or HttpxPageSource()

    logger.debug("GET {}", url)
    try:
        return await source.fetch(url, headers.as_request_headers())
    except YellowBridgeError:
        raise
    except Exception as exc:
        raise map_error(exc, FetchError) from exc
