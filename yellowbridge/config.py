"""Centralised settings for the YellowBridge client.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Origin site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "YELLOWBRIDGE_BASE_URL", "https://www.yellowbridge.com"
        ).rstrip("/")
    )

    @property
    def landing_url(self) -> str:
        """Character dictionary page that hands out the session cookie.

        Also sent as the ``Referer`` on every authenticated request.
        """
        return f"{self.base_url}/chinese/character-dictionary.php"

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("YELLOWBRIDGE_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "YELLOWBRIDGE_USER_AGENT",
            "Mozilla/5.0 (compatible; yellowbridge-client/1.0)",
        )
    )


# Module-level singleton, import this everywhere:
#   from yellowbridge.config import settings
settings = Settings()
