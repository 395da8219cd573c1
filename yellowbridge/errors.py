"""Error types raised by the YellowBridge client.

Every public coroutine fails with a :class:`YellowBridgeError` (or one of its
subclasses).  Callers that only care about *that* something went wrong can
read ``message``; the original exception is still reachable through
``__cause__``.
"""

from __future__ import annotations

from typing import Optional

import httpx


class YellowBridgeError(Exception):
    """Base error carrying a human-readable message.

    ``http_code`` / ``http_message`` are only populated when the failure was
    an HTTP status error from the origin site.
    """

    def __init__(
        self,
        message: str,
        http_code: Optional[int] = None,
        http_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_code = http_code
        self.http_message = http_message


class SessionError(YellowBridgeError):
    """No session cookie could be obtained from the landing page."""


class FetchError(YellowBridgeError):
    """An authenticated page request failed at the transport or HTTP level."""


def _status_details(exc: BaseException) -> tuple[Optional[int], Optional[str]]:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code, exc.response.reason_phrase
    return None, None


def map_error(
    exc: BaseException, cls: type[YellowBridgeError] = YellowBridgeError
) -> YellowBridgeError:
    """Wrap an arbitrary exception in *cls*, keeping only its message.

    HTTP status errors additionally keep their status code and reason phrase.
    """
    code, reason = _status_details(exc)
    return cls(str(exc) or "Unknown error", http_code=code, http_message=reason)
