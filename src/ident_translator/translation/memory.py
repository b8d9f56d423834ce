"""
Translation memory for dictionary lookups.

Remembers the best translation found for each lowercase word, and also the
words for which nothing was found (stored as the empty string), so that a
word is scanned against the dictionary at most once. The memory is loaded
before a run and written back afterwards by the storage layer, which lets it
carry over between runs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

logger = logging.getLogger("ident-translator")

NOT_FOUND = ""


@dataclass
class TranslationMemoryStats:
    """Statistics for the translation memory.

    Attributes:
        total_entries: Number of remembered words.
        found_entries: Remembered words with an actual translation.
        hit_count: Lookups answered from memory.
        miss_count: Lookups that required a dictionary scan.
        hit_rate: Ratio of hits to total lookups (0.0-1.0).
    """
    total_entries: int
    found_entries: int
    hit_count: int
    miss_count: int
    hit_rate: float


class TranslationMemory:
    """Memoization cache, lowercase word -> translation.

    Any stored value, including the empty "nothing found" sentinel, is
    final: ``get`` returns it and the translator does not scan again.

    Usage:
        memory = TranslationMemory({"kunde": "customer"})

        memory.get("Kunde")          # "customer"
        memory.store("daten", "")    # remember the miss
        memory.get("daten")          # ""
        memory.get("unbekannt")      # None, never searched
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        """Initialize the memory.

        Args:
            entries: Previously persisted translations; keys are lowercased.
        """
        self._entries: dict[str, str] = {}
        self._hit_count = 0
        self._miss_count = 0
        for word, translation in (entries or {}).items():
            self._entries[word.lower()] = translation

    def get(self, word: str) -> str | None:
        """Look up a remembered translation.

        Args:
            word: Word in any casing.

        Returns:
            The translation, ``""`` if the word was searched without result,
            or None if it was never searched.
        """
        key = word.lower()
        if key not in self._entries:
            self._miss_count += 1
            return None

        self._hit_count += 1
        translation = self._entries[key]
        logger.debug(f"Translation memory: hit for '{key}' -> '{translation}'")
        return translation

    def store(self, word: str, translation: str) -> None:
        """Remember the result of a dictionary scan.

        Args:
            word: Word in any casing.
            translation: Best translation, or ``""`` if none was found.
        """
        key = word.lower()
        self._entries[key] = translation
        logger.debug(f"Translation memory: stored '{key}' -> '{translation}'")

    def mark_not_found(self, word: str) -> None:
        """Remember that a word has no translation."""
        self.store(word, NOT_FOUND)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate remembered ``(word, translation)`` pairs in insertion order."""
        return iter(list(self._entries.items()))

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def get_stats(self) -> TranslationMemoryStats:
        """Return memory statistics.

        Returns:
            TranslationMemoryStats with current metrics.
        """
        total_lookups = self._hit_count + self._miss_count
        hit_rate = self._hit_count / total_lookups if total_lookups > 0 else 0.0

        return TranslationMemoryStats(
            total_entries=len(self._entries),
            found_entries=sum(1 for value in self._entries.values() if value),
            hit_count=self._hit_count,
            miss_count=self._miss_count,
            hit_rate=hit_rate,
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "NOT_FOUND",
    "TranslationMemory",
    "TranslationMemoryStats",
]
