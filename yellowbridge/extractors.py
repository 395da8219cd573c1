"""Field extractors: one coroutine per YellowBridge page type.

Every extractor fetches a single page, parses it with BeautifulSoup and maps
it onto a record through the matching table in :mod:`yellowbridge.selectors`.
Extractors never call one another and share no state.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from yellowbridge import selectors
from yellowbridge.config import settings
from yellowbridge.errors import YellowBridgeError, map_error
from yellowbridge.fetcher import PageSource, fetch_page
from yellowbridge.models import (
    CharacterDetails,
    CharacterEtymology,
    WordExamples,
    WordMeaning,
    WordStrokeInfo,
    YbHeaders,
)

STROKE_ORDER_PATH = "/chinese/character-stroke-order.php"
ETYMOLOGY_PATH = "/chinese/character-etymology.php"
CHARSEARCH_PATH = "/chinese/charsearch.php"
SENTSEARCH_PATH = "/chinese/sentsearch.php"
WORDSEARCH_PATH = "/chinese/wordsearch.php"


def page_url(path: str, param: str, value: str) -> str:
    """Build ``{base_url}{path}?{param}={value}`` with *value* percent-encoded."""
    return str(httpx.URL(f"{settings.base_url}{path}", params={param: value}))


async def _scrape(
    url: str,
    table: Mapping[str, Any],
    headers: Optional[YbHeaders],
    source: Optional[PageSource],
) -> dict:
    """Fetch *url* and apply *table*, normalising every failure to a YellowBridgeError."""
    try:
        html = await fetch_page(url, headers, source)
        soup = BeautifulSoup(html, "html.parser")
        return selectors.parse_fields(soup, table)
    except YellowBridgeError as exc:
        logger.warning("Scrape of {} failed: {}", url, exc.message)
        raise
    except Exception as exc:
        logger.warning("Scrape of {} failed: {}", url, exc)
        raise map_error(exc) from exc


async def get_word_stroke_info(
    word: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> WordStrokeInfo:
    """Return stroke/radical info for *word* (may be multi-character)."""
    fields = await _scrape(
        page_url(STROKE_ORDER_PATH, "word", word), selectors.STROKE_INFO, headers, source
    )
    return WordStrokeInfo(**fields)


async def get_character_etymology(
    character: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> CharacterEtymology:
    """Return formation/simplification data for a single *character*."""
    fields = await _scrape(
        page_url(ETYMOLOGY_PATH, "zi", character), selectors.ETYMOLOGY, headers, source
    )
    return CharacterEtymology(**fields)


async def get_character_details(
    character: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> CharacterDetails:
    """Return pronunciations, ranks, related characters, common words and
    encodings for a single *character*."""
    fields = await _scrape(
        page_url(CHARSEARCH_PATH, "zi", character),
        selectors.CHARACTER_DETAILS,
        headers,
        source,
    )
    return CharacterDetails(**fields)


async def get_word_examples(
    word: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> WordExamples:
    fields = await _scrape(
        page_url(SENTSEARCH_PATH, "word", word), selectors.WORD_EXAMPLES, headers, source
    )
    return WordExamples(**fields)


async def get_word_meaning(
    word: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> WordMeaning:
    fields = await _scrape(
        page_url(WORDSEARCH_PATH, "word", word), selectors.WORD_MEANING, headers, source
    )
    return WordMeaning(**fields)
