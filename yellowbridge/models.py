"""Data models returned by the YellowBridge client.

Every record is a frozen dataclass built once at the end of a
fetch/parse cycle.  Fields the page does not provide hold their fallback
value: ``""`` for text, ``0`` for numbers and ``[]`` for lists.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class YbHeaders:
    """Referer + session-cookie pair required for an authorised scrape."""

    referer: str
    cookie: str

    def __post_init__(self) -> None:
        if not self.cookie:
            raise ValueError("YbHeaders.cookie must be non-empty")

    def as_request_headers(self) -> Dict[str, str]:
        return {"Referer": self.referer, "Cookie": self.cookie}


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        """Return the record as plain JSON-ready data."""
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class CodeValue(_Record):
    """One row of an input-method or computer-encoding table."""

    code: str = ""
    value: str = ""


@dataclass(frozen=True)
class SampleSentence(_Record):
    english: str = ""
    chinese: str = ""


@dataclass(frozen=True)
class WordStrokeInfo(_Record):
    """Headword data and radical/stroke counts from the stroke-order page."""

    english_definition: str = ""
    simplified_script: str = ""
    traditional_script: str = ""
    part_of_speech: str = ""
    kangxi_radical: str = ""
    additional_strokes: int = 0
    total_strokes: int = 0
    structure: str = ""  # e.g. "left-to-right"


@dataclass(frozen=True)
class CharacterEtymology(_Record):
    definition: str = ""
    formation_method: str = ""
    simplification_method: str = ""


@dataclass(frozen=True)
class CharacterDetails(_Record):
    """Everything the character search page knows about a single character."""

    meaning_definition: str = ""
    pronunciation_mandarin: str = ""
    pronunciation_cantonese: str = ""
    pronunciation_japanese_kun: str = ""
    pronunciation_japanese_on: str = ""
    pronunciation_korean: str = ""
    pronunciation_vietnamese: str = ""
    character_rank_simplified: int = 0
    character_rank_everyday_usage: int = 0
    character_rank_hsk3: int = 0
    character_rank_hsk3_writing: int = 0
    related_character_kangxi_radical: str = ""
    related_character_traditional_script: str = ""
    related_semantic: str = ""
    related_specialized_semantic: str = ""
    common_words_with_character: List[str] = field(default_factory=list)
    input_method_codes: List[CodeValue] = field(default_factory=list)
    computer_encoding: List[CodeValue] = field(default_factory=list)


@dataclass(frozen=True)
class WordExamples(_Record):
    english_definition: str = ""
    simplified_script: str = ""
    traditional_script: str = ""
    part_of_speech: str = ""
    sample_sentences: List[SampleSentence] = field(default_factory=list)


@dataclass(frozen=True)
class WordMeaning(_Record):
    english_definition: str = ""
    simplified_script: str = ""
    traditional_script: str = ""
    pinyin: str = ""
    effective_pinyin: str = ""
    zhuyin: str = ""
    cantonese: str = ""
    part_of_speech: str = ""
    measure_word: str = ""
    proficiency_level: str = ""
    words_with_same_head_word: List[str] = field(default_factory=list)
    words_with_same_tail_word: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WordAggregate(_Record):
    """Stroke info, examples and meaning for a word of any length."""

    word: str
    stroke_info: WordStrokeInfo
    examples: WordExamples
    meaning: WordMeaning


@dataclass(frozen=True)
class CharacterAggregate(WordAggregate):
    """A :class:`WordAggregate` plus the single-character-only records."""

    etymology: CharacterEtymology = field(default_factory=CharacterEtymology)
    details: CharacterDetails = field(default_factory=CharacterDetails)
