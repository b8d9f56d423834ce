"""
Data models for dictionary-based identifier translation.
"""

from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, Field


class TranslationStatus(str, Enum):
    """Outcome of translating a word or a whole identifier.

    Word level: ``TRANSLATED``, ``NOT_FOUND`` or ``INVALID`` (too short or
    containing digits, never looked up). Identifier level: ``TRANSLATED``,
    ``PARTIAL`` (some parts kept in their original form) or ``UNTRANSLATED``.
    """

    TRANSLATED = "translated"
    PARTIAL = "partial"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    UNTRANSLATED = "untranslated"


class DictionaryEntry(BaseModel):
    """A single German/English pair of a bilingual dictionary.

    Attributes:
        german: Lowercase German phrase, may carry annotations
                (e.g. "speichern {vt}")
        english: Lowercase English phrase (e.g. "to save [comp.]")
    """
    model_config = {"frozen": True}

    german: str = Field(..., description="Lowercase German phrase")
    english: str = Field(..., description="Lowercase English phrase")


class BilingualDictionary:
    """Ordered, read-only German/English phrase list.

    Entry order matters: it decides which candidate tokens are scored first
    and therefore how frequency ties are broken. Duplicate German phrases
    are kept as separate entries.

    The inverse mapping (English -> German) is built once and used to
    recognize fragments that are already English.

    Example:
        >>> dictionary = BilingualDictionary.from_pairs([("speichern", "to save")])
        >>> dictionary.contains_english("to save")
        True
    """

    def __init__(self, entries: Iterable[DictionaryEntry] = ()) -> None:
        self._entries: tuple[DictionaryEntry, ...] = tuple(entries)
        self._english_to_german: dict[str, str] = {
            entry.english: entry.german for entry in self._entries
        }

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "BilingualDictionary":
        """Build a dictionary from ``(german, english)`` pairs, lowercasing both."""
        return cls(
            DictionaryEntry(german=german.lower(), english=english.lower())
            for german, english in pairs
        )

    def german_entries(self) -> Iterator[DictionaryEntry]:
        """Iterate entries in load order."""
        return iter(self._entries)

    @property
    def english_to_german(self) -> dict[str, str]:
        """Inverse mapping, English phrase -> German phrase (copy)."""
        return dict(self._english_to_german)

    def contains_english(self, phrase: str) -> bool:
        """Check whether a phrase is the English side of any entry."""
        return phrase in self._english_to_german

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class WordTranslation(BaseModel):
    """Result of translating a single word part.

    Attributes:
        word: The word as passed to the translator
        translation: English translation, empty unless status is TRANSLATED
        status: TRANSLATED, NOT_FOUND or INVALID
    """
    word: str
    translation: str = ""
    status: TranslationStatus = TranslationStatus.NOT_FOUND

    @property
    def found(self) -> bool:
        return self.status == TranslationStatus.TRANSLATED


class TranslationResult(BaseModel):
    """Result of translating a whole identifier.

    Attributes:
        source: The original identifier
        translation: Reassembled English identifier, or "" if no part translated
        status: TRANSLATED, PARTIAL or UNTRANSLATED
        parts: Word parts of the original identifier
        translated_parts: Parts after translation (untranslated ones unchanged)
    """
    source: str = Field(..., description="Original identifier")
    translation: str = Field(default="", description="Translated identifier or empty marker")
    status: TranslationStatus = Field(default=TranslationStatus.UNTRANSLATED)
    parts: list[str] = Field(default_factory=list)
    translated_parts: list[str] = Field(default_factory=list)

    @property
    def is_translated(self) -> bool:
        return self.status != TranslationStatus.UNTRANSLATED
