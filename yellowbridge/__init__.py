"""YellowBridge dictionary client: session, page scraping and aggregates."""

from loguru import logger

from yellowbridge.aggregate import get_character_aggregate, get_word_aggregate
from yellowbridge.errors import FetchError, SessionError, YellowBridgeError
from yellowbridge.extractors import (
    get_character_details,
    get_character_etymology,
    get_word_examples,
    get_word_meaning,
    get_word_stroke_info,
)
from yellowbridge.fetcher import HttpxPageSource, PageSource, fetch_page
from yellowbridge.models import (
    CharacterAggregate,
    CharacterDetails,
    CharacterEtymology,
    CodeValue,
    SampleSentence,
    WordAggregate,
    WordExamples,
    WordMeaning,
    WordStrokeInfo,
    YbHeaders,
)
from yellowbridge.session import get_yellowbridge_headers

# Library code stays quiet unless an application opts in with
# ``logger.enable("yellowbridge")``.
logger.disable("yellowbridge")

__all__ = [
    "get_yellowbridge_headers",
    "get_character_aggregate",
    "get_word_aggregate",
    "get_word_stroke_info",
    "get_character_etymology",
    "get_character_details",
    "get_word_examples",
    "get_word_meaning",
    "fetch_page",
    "PageSource",
    "HttpxPageSource",
    "YellowBridgeError",
    "SessionError",
    "FetchError",
    "YbHeaders",
    "WordStrokeInfo",
    "CharacterEtymology",
    "CharacterDetails",
    "CodeValue",
    "WordExamples",
    "SampleSentence",
    "WordMeaning",
    "WordAggregate",
    "CharacterAggregate",
]
