"""Declarative field-to-selector tables for every YellowBridge page type.

Each page is described by a mapping of record field name to a *lookup*: a
small object whose ``extract(soup)`` returns the field value (or its fallback)
from a parsed document.  When the site's markup changes, only these tables
should need editing.

A labelled value is read from the ``td`` following the cell whose stripped
text equals the label, so "Semantic" never picks up "Specialized Semantic".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from yellowbridge.models import CodeValue, SampleSentence

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class Label:
    """The ``td`` after the cell labelled exactly *text* in ``table#<table>``.

    *tail* is an optional selector applied inside that value cell.
    """

    table: str
    text: str
    tail: str = ""

    def find(self, soup: BeautifulSoup) -> Optional[Tag]:
        for cell in soup.select(f"table#{self.table} td"):
            if cell.get_text().strip() != self.text:
                continue
            value = cell.find_next_sibling("td")
            if value is None:
                continue
            return value.select_one(self.tail) if self.tail else value
        return None


Locator = Union[str, Label]


def label(table: str, text: str, tail: str = "") -> Label:
    return Label(table, text, tail.strip())


def _find(soup: BeautifulSoup, locator: Locator) -> Optional[Tag]:
    if isinstance(locator, Label):
        return locator.find(soup)
    return soup.select_one(locator)


def parse_int(text: str) -> int:
    """Parse the leading integer of *text*, returning ``0`` when there is none."""
    match = _LEADING_INT.match(text or "")
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # digit runs beyond the interpreter's int conversion limit
        return 0


# ---------------------------------------------------------------------------
# Lookup strategies
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    """Stripped text of the element found by *locator*."""

    locator: Locator

    def extract(self, soup: BeautifulSoup) -> str:
        node = _find(soup, self.locator)
        return node.get_text().strip() if node is not None else ""


@dataclass(frozen=True)
class Attr:
    """Stripped value of *attr* on the element found by *locator*."""

    locator: Locator
    attr: str

    def extract(self, soup: BeautifulSoup) -> str:
        node = _find(soup, self.locator)
        if node is None:
            return ""
        value = node.get(self.attr)
        if isinstance(value, list):
            value = " ".join(value)
        return (value or "").strip()


@dataclass(frozen=True)
class Number:
    """Leading integer of the text found by *locator*; ``0`` otherwise."""

    locator: Locator

    def extract(self, soup: BeautifulSoup) -> int:
        return parse_int(Text(self.locator).extract(soup))


@dataclass(frozen=True)
class Rows:
    """One value per table row.

    With a single column the value is that cell's text.  With several, the
    cells are passed by name to *record*.  ``skip_header`` drops the first
    matched row.
    """

    selector: str
    columns: Tuple[str, ...] = ("value",)
    record: Optional[Callable[..., Any]] = None
    skip_header: bool = True

    def extract(self, soup: BeautifulSoup) -> List[Any]:
        rows = soup.select(self.selector)
        if self.skip_header:
            rows = rows[1:]
        values: List[Any] = []
        for row in rows:
            cells = {
                name: _cell_text(row, index)
                for index, name in enumerate(self.columns, start=1)
            }
            if self.record is None:
                values.append(next(iter(cells.values())))
            else:
                values.append(self.record(**cells))
        return values


@dataclass(frozen=True)
class Sentences:
    """Bilingual example sentences, one per ``li``: English, ``<br>``, Chinese.

    Anything after a second ``<br>`` (usually pinyin) is ignored.
    """

    selector: str

    def extract(self, soup: BeautifulSoup) -> List[SampleSentence]:
        sentences: List[SampleSentence] = []
        for item in soup.select(self.selector):
            parts: List[List[str]] = [[]]
            for child in item.children:
                if isinstance(child, Tag) and child.name == "br":
                    if len(parts) == 2:
                        break
                    parts.append([])
                    continue
                parts[-1].append(_node_text(child))
            before = parts[0]
            after = parts[1] if len(parts) > 1 else []
            sentences.append(
                SampleSentence(
                    english="".join(before).strip(),
                    chinese="".join(after).strip(),
                )
            )
        return sentences


def _cell_text(row: Tag, index: int) -> str:
    cell = row.select_one(f"td:nth-child({index})")
    return cell.get_text().strip() if cell is not None else ""


def _node_text(node: Any) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    return node.get_text()


def parse_fields(soup: BeautifulSoup, table: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply every lookup in *table* to *soup* and return ``{field: value}``."""
    return {name: lookup.extract(soup) for name, lookup in table.items()}


# ---------------------------------------------------------------------------
# Page tables
# ---------------------------------------------------------------------------

STROKE_INFO = {
    "english_definition": Text(label("mainData", "English Definition")),
    "simplified_script": Text(label("mainData", "Simplified Script")),
    "traditional_script": Text(label("mainData", "Traditional Script", " a")),
    "part_of_speech": Text(label("mainData", "Part of Speech")),
    "kangxi_radical": Text(label("radical", "Kangxi Radical", " a")),
    "additional_strokes": Number(label("radical", "Additional Stroke(s)")),
    "total_strokes": Number(label("radical", "Total Stroke(s)")),
    "structure": Attr(label("structure", "Structure", " span"), "title"),
}

ETYMOLOGY = {
    "definition": Text(label("formation", "Definition")),
    "formation_method": Text(label("formation", "Formation")),
    "simplification_method": Text(label("formation", "Simplification")),
}

CHARACTER_DETAILS = {
    "meaning_definition": Text(label("meaning", "Definition")),
    "pronunciation_mandarin": Text(label("pronunciation", "Mandarin")),
    "pronunciation_cantonese": Text(label("pronunciation", "Cantonese")),
    "pronunciation_japanese_kun": Text(label("pronunciation", "Japanese Kun")),
    "pronunciation_japanese_on": Text(label("pronunciation", "Japanese On")),
    "pronunciation_korean": Text(label("pronunciation", "Korean")),
    "pronunciation_vietnamese": Text(label("pronunciation", "Vietnamese")),
    "character_rank_simplified": Number(label("charRank", "Simplified")),
    "character_rank_everyday_usage": Number(label("charRank", "常用字表")),
    "character_rank_hsk3": Number(label("charRank", "HSK v.3 Level")),
    "character_rank_hsk3_writing": Number(label("charRank", "HSK v.3 Writing Level")),
    "related_character_kangxi_radical": Text(label("relatedChars", "Kangxi Radical")),
    "related_character_traditional_script": Text(label("relatedChars", "Traditional Script")),
    "related_semantic": Text(label("relatedChars", "Semantic")),
    "related_specialized_semantic": Text(label("relatedChars", "Specialized Semantic")),
    "common_words_with_character": Rows("table#commonWords tr"),
    "input_method_codes": Rows("table#inputMethod tr", ("code", "value"), CodeValue),
    "computer_encoding": Rows("table#encoding tr", ("code", "value"), CodeValue),
}

WORD_EXAMPLES = {
    "english_definition": Text(label("mainData", "English Definition")),
    "simplified_script": Text(label("mainData", "Simplified Script")),
    "traditional_script": Text(label("mainData", "Traditional Script")),
    "part_of_speech": Text(label("mainData", "Part of Speech")),
    "sample_sentences": Sentences("table#sentences tr:nth-child(1) td:nth-child(1) li"),
}

WORD_MEANING = {
    "english_definition": Text(label("mainData", "English Definition")),
    "simplified_script": Text(label("mainData", "Simplified Script")),
    "traditional_script": Text(label("mainData", "Traditional Script")),
    "pinyin": Text(label("mainData", "Pinyin")),
    "effective_pinyin": Text(label("mainData", "Effective Pinyin")),
    "zhuyin": Text(label("mainData", "Zhuyin")),
    "cantonese": Text(label("mainData", "Cantonese")),
    "part_of_speech": Text(label("mainData", "Part of Speech")),
    "measure_word": Text(label("mainData", "Measure Word")),
    "proficiency_level": Text(label("mainData", "Proficiency Test Level")),
    # Data rows only; these tables carry no header row of ``td`` cells.
    "words_with_same_head_word": Rows("#sameHead tr:has(> td)", skip_header=False),
    "words_with_same_tail_word": Rows("#sameTail tr:has(> td)", skip_header=False),
}
