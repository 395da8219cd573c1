"""Shared fixtures: canned YellowBridge pages and an in-memory page source.

The HTML below mirrors the table ids and label cells of the live site closely
enough to exercise every selector, without any network access.
"""

from __future__ import annotations

from typing import Dict, Generator, List, Tuple

import httpx
import pytest
import respx

from yellowbridge.config import settings
from yellowbridge.extractors import (
    CHARSEARCH_PATH,
    ETYMOLOGY_PATH,
    SENTSEARCH_PATH,
    STROKE_ORDER_PATH,
    WORDSEARCH_PATH,
)

SESSION_COOKIE = "PHPSESSID=abc123"

STROKE_HTML = """\
<html><body>
<table id="mainData">
  <tr><td>English Definition</td><td> good; well </td></tr>
  <tr><td>Simplified Script</td><td>好</td></tr>
  <tr><td>Traditional Script</td><td><a href="/chinese/charsearch.php?zi=好">好</a></td></tr>
  <tr><td>Part of Speech</td><td>adjective</td></tr>
</table>
<table id="radical">
  <tr><td>Kangxi Radical </td><td><a href="#">女</a> (38)</td></tr>
  <tr><td>Additional Stroke(s)</td><td>3</td></tr>
  <tr><td>Total Stroke(s)</td><td>6 strokes</td></tr>
</table>
<table id="structure">
  <tr><td>Structure</td><td><span title=" Left to right ">⿰</span></td></tr>
</table>
</body></html>
"""

ETYMOLOGY_HTML = """\
<html><body>
<table id="formation">
  <tr><td>Definition</td><td>good, excellent, fine; well</td></tr>
  <tr><td>Formation</td><td>Ideographic: A woman 女 with a son 子</td></tr>
  <tr><td>Simplification</td><td>No simplification</td></tr>
</table>
</body></html>
"""

DETAILS_HTML = """\
<html><body>
<table id="meaning">
  <tr><td>Definition</td><td>good, excellent, fine; well</td></tr>
</table>
<table id="pronunciation">
  <tr><td>Mandarin</td><td>hǎo</td></tr>
  <tr><td>Cantonese</td><td>hou2</td></tr>
  <tr><td>Japanese Kun</td><td>yoi</td></tr>
  <tr><td>Japanese On</td><td>kou</td></tr>
  <tr><td>Korean</td><td>ho</td></tr>
  <tr><td>Vietnamese</td><td>hảo</td></tr>
</table>
<table id="charRank">
  <tr><td>Simplified</td><td>82</td></tr>
  <tr><td>常用字表</td><td>1044 (常用字)</td></tr>
  <tr><td>HSK v.3 Level</td><td>1</td></tr>
  <tr><td>HSK v.3 Writing Level</td><td>n/a</td></tr>
</table>
<table id="relatedChars">
  <tr><td>Kangxi Radical</td><td>女</td></tr>
  <tr><td>Traditional Script</td><td>好</td></tr>
  <tr><td>Semantic</td><td>佳</td></tr>
  <tr><td>Specialized Semantic</td><td>妤</td></tr>
</table>
<table id="commonWords">
  <tr><th>Word</th><th>Pinyin</th></tr>
  <tr><td>好的</td><td>hǎo de</td></tr>
  <tr><td>你好</td><td>nǐ hǎo</td></tr>
</table>
<table id="inputMethod">
  <tr><th>Method</th><th>Code</th></tr>
  <tr><td>Cangjie</td><td>VND</td></tr>
  <tr><td>Four Corner</td><td>47447</td></tr>
</table>
<table id="encoding">
  <tr><th>Encoding</th><th>Value</th></tr>
  <tr><td>Unicode</td><td>U+597D</td></tr>
</table>
</body></html>
"""

EXAMPLES_HTML = """\
<html><body>
<table id="mainData">
  <tr><td>English Definition</td><td>good; well</td></tr>
  <tr><td>Simplified Script</td><td>好</td></tr>
  <tr><td>Traditional Script</td><td>好</td></tr>
  <tr><td>Part of Speech</td><td>adjective</td></tr>
</table>
<table id="sentences">
  <tr><td><ul>
    <li><b>Good</b> morning!<br> 早上好！ </li>
    <li>He is a good person.<br>他是个好人。</li>
  </ul></td><td>sidebar</td></tr>
  <tr><td><ul><li>Not a sample<br>不是</li></ul></td></tr>
</table>
</body></html>
"""

MEANING_HTML = """\
<html><body>
<table id="mainData">
  <tr><td>English Definition</td><td>hello; hi</td></tr>
  <tr><td>Simplified Script</td><td>你好</td></tr>
  <tr><td>Traditional Script</td><td>你好</td></tr>
  <tr><td>Pinyin</td><td>nǐ hǎo</td></tr>
  <tr><td>Effective Pinyin</td><td>ní hǎo</td></tr>
  <tr><td>Zhuyin</td><td>ㄋㄧˇ ㄏㄠˇ</td></tr>
  <tr><td>Cantonese</td><td>nei5 hou2</td></tr>
  <tr><td>Part of Speech</td><td>interjection</td></tr>
  <tr><td>Measure Word</td><td>个</td></tr>
  <tr><td>Proficiency Test Level</td><td>HSK 1</td></tr>
</table>
<table id="sameHead">
  <thead><tr><th>Word</th><th>Meaning</th></tr></thead>
  <tbody>
    <tr><td>你好吗</td><td>how are you?</td></tr>
    <tr><td>你好坏</td><td>you are so bad</td></tr>
  </tbody>
</table>
<table id="sameTail">
  <tr><td>您好</td><td>hello (polite)</td></tr>
</table>
</body></html>
"""

PAGES: Dict[str, str] = {
    STROKE_ORDER_PATH: STROKE_HTML,
    ETYMOLOGY_PATH: ETYMOLOGY_HTML,
    CHARSEARCH_PATH: DETAILS_HTML,
    SENTSEARCH_PATH: EXAMPLES_HTML,
    WORDSEARCH_PATH: MEANING_HTML,
}


class FakeSource:
    """In-memory :class:`~yellowbridge.fetcher.PageSource` keyed by URL path."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    async def fetch(self, url: str, headers: Dict[str, str]) -> str:
        self.calls.append((url, headers))
        return self.pages.get(httpx.URL(url).path, "<html><body></body></html>")


@pytest.fixture()
def source() -> FakeSource:
    return FakeSource(dict(PAGES))


@pytest.fixture()
def empty_source() -> FakeSource:
    return FakeSource({})


@pytest.fixture()
def yb_routes() -> Generator[Dict[str, respx.Route], None, None]:
    """Mock the landing page and all five page types at the httpx transport."""
    with respx.mock(assert_all_called=False) as mock:
        routes = {
            "landing": mock.get(settings.landing_url).mock(
                return_value=httpx.Response(
                    200,
                    headers={"set-cookie": f"{SESSION_COOKIE}; path=/; HttpOnly"},
                    text="<html></html>",
                )
            ),
        }
        for name, path in (
            ("stroke", STROKE_ORDER_PATH),
            ("etymology", ETYMOLOGY_PATH),
            ("details", CHARSEARCH_PATH),
            ("examples", SENTSEARCH_PATH),
            ("meaning", WORDSEARCH_PATH),
        ):
            routes[name] = mock.get(url__startswith=f"{settings.base_url}{path}").mock(
                return_value=httpx.Response(200, text=PAGES[path])
            )
        yield routes
