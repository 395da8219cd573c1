"""Aggregate lookups: acquire one session, fan out extractors, merge the results.

Both aggregators follow the same two phases:

1. Acquire a session via :func:`get_yellowbridge_headers` unless the caller
   passed one, so the fan-out never triggers a cookie fetch of its own.
2. Run the relevant extractors **concurrently** with ``asyncio.gather``.  The
   first failure propagates and no partial aggregate is returned.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from loguru import logger

from yellowbridge.extractors import (
    get_character_details,
    get_character_etymology,
    get_word_examples,
    get_word_meaning,
    get_word_stroke_info,
)
from yellowbridge.fetcher import PageSource
from yellowbridge.models import CharacterAggregate, WordAggregate, YbHeaders
from yellowbridge.session import get_yellowbridge_headers


async def get_character_aggregate(
    character: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> CharacterAggregate:
    """Return every record YellowBridge has for a single *character*."""
    if headers is None:
        headers = await get_yellowbridge_headers()

    logger.debug("Fetching character aggregate for {!r} (5 pages)", character)
    stroke_info, etymology, details, examples, meaning = await asyncio.gather(
        get_word_stroke_info(character, headers, source),
        get_character_etymology(character, headers, source),
        get_character_details(character, headers, source),
        get_word_examples(character, headers, source),
        get_word_meaning(character, headers, source),
    )
    return CharacterAggregate(
        word=character,
        stroke_info=stroke_info,
        examples=examples,
        meaning=meaning,
        etymology=etymology,
        details=details,
    )


async def get_word_aggregate(
    word: str,
    headers: Optional[YbHeaders] = None,
    source: Optional[PageSource] = None,
) -> WordAggregate:
    """Return stroke info, examples and meaning for *word* (any length).

    Etymology and details exist only for single characters and are omitted.
    """
    if headers is None:
        headers = await get_yellowbridge_headers()

    logger.debug("Fetching word aggregate for {!r} (3 pages)", word)
    stroke_info, examples, meaning = await asyncio.gather(
        get_word_stroke_info(word, headers, source),
        get_word_examples(word, headers, source),
        get_word_meaning(word, headers, source),
    )
    return WordAggregate(
        word=word,
        stroke_info=stroke_info,
        examples=examples,
        meaning=meaning,
    )
