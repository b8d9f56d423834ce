"""
Frequency-scoring translator for dict.cc style dictionaries.

A dictionary of this kind lists many phrases per headword ("speichern" ->
"to save", "to store", "to save sth. to disk", ...). For a word, every entry
whose German side contains the word is a candidate; the English tokens of all
candidates are counted and the most frequent one is taken as the core
translation, which filters out the incidental words of example phrases.
"""

import logging
import re
from collections import Counter

from ..wordprocessing import TextCleaner
from .base import WordTranslator
from .decompounder import Decompounder
from .memory import NOT_FOUND, TranslationMemory
from .models import BilingualDictionary, TranslationStatus, WordTranslation

logger = logging.getLogger("ident-translator")

# Stop scanning once this many distinct tokens have been scored
MAX_CANDIDATES = 40
# Minimum length of a translatable word and of a scored token
MIN_WORD_LENGTH = 3
# English phrases with more tokens than this are example sentences, not translations
MAX_TRANSLATION_TOKENS = 4

UNTRANSLATED_MARKER = "N/A"

TOKEN_SEPARATOR = re.compile(r"[-\s]")
CONTAINS_DIGIT = re.compile(r"\d")


class DictionaryTranslator(WordTranslator):
    """Translates German words by scanning a bilingual dictionary.

    Words that cannot be found as a whole are decomposed into their compound
    parts (if a decompounder is configured) and each part is translated on
    its own.

    Example:
        >>> dictionary = BilingualDictionary.from_pairs([
        ...     ("speichern", "to save [comp.]"),
        ...     ("speichern", "to store [data]"),
        ... ])
        >>> translator = DictionaryTranslator()
        >>> translator.translate("speichern", dictionary, TranslationMemory()).translation
        'save'
    """

    def __init__(
        self,
        decompounder: Decompounder | None = None,
        cleaner: TextCleaner | None = None,
        max_candidates: int = MAX_CANDIDATES,
        min_word_length: int = MIN_WORD_LENGTH,
        max_translation_tokens: int = MAX_TRANSLATION_TOKENS,
    ) -> None:
        self.decompounder = decompounder
        self.cleaner = cleaner or TextCleaner()
        self.max_candidates = max_candidates
        self.min_word_length = min_word_length
        self.max_translation_tokens = max_translation_tokens

    @property
    def name(self) -> str:
        return "dict"

    def is_valid(self, word: str) -> bool:
        """Check that a word is long enough and contains no digits."""
        return len(word) > self.min_word_length and not CONTAINS_DIGIT.search(word)

    def translate(
        self,
        word: str,
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> WordTranslation:
        if not self.is_valid(word):
            return WordTranslation(word=word, status=TranslationStatus.INVALID)

        # Whole word first, decomposition only as a fallback
        translation = self.translate_word(word, dictionary, memory)
        if translation:
            return WordTranslation(word=word, translation=translation, status=TranslationStatus.TRANSLATED)

        if self.decompounder is None:
            return WordTranslation(word=word, status=TranslationStatus.NOT_FOUND)

        sub_parts = self.decompounder.split(word)
        if len(sub_parts) < 2:
            return WordTranslation(word=word, status=TranslationStatus.NOT_FOUND)

        translated_sub_parts: list[str] = []
        has_translation = False
        for sub_part in sub_parts:
            sub_translation = self.translate_word(sub_part, dictionary, memory)
            if sub_translation:
                translated_sub_parts.append(sub_translation)
                has_translation = True
            else:
                translated_sub_parts.append(UNTRANSLATED_MARKER)

        if not has_translation:
            return WordTranslation(word=word, status=TranslationStatus.NOT_FOUND)

        combined = "".join(translated_sub_parts)
        logger.debug(f"Translated compound '{word}' via {sub_parts} -> '{combined}'")
        return WordTranslation(word=word, translation=combined, status=TranslationStatus.TRANSLATED)

    def translate_word(
        self,
        word: str,
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> str:
        """Find the most frequent English token for a word.

        Consults the memory first; on a miss, scans the dictionary and stores
        the outcome (the empty string if nothing was found).

        Args:
            word: Word to translate, any casing.
            dictionary: Dictionary to scan.
            memory: Translation memory, updated in place.

        Returns:
            The best translation, or ``""`` if none was found.
        """
        lowered = word.lower()

        remembered = memory.get(lowered)
        if remembered is not None:
            return remembered

        counts = self._score_candidates(lowered, dictionary)
        if not counts:
            memory.store(lowered, NOT_FOUND)
            return NOT_FOUND

        # max() keeps the first-encountered token among equal counts
        best = max(counts, key=counts.__getitem__)
        memory.store(lowered, best)
        logger.debug(f"Translated '{lowered}' -> '{best}' ({dict(counts)})")
        return best

    def _score_candidates(self, word: str, dictionary: BilingualDictionary) -> Counter[str]:
        """Count English tokens over all entries whose German side contains the word."""
        counts: Counter[str] = Counter()

        for entry in dictionary.german_entries():
            if len(counts) > self.max_candidates:
                break

            key_tokens = TOKEN_SEPARATOR.split(self.cleaner.clean_translation(entry.german))
            if word not in key_tokens:
                continue

            value_tokens = TOKEN_SEPARATOR.split(self.cleaner.clean_translation(entry.english))
            if len(value_tokens) > self.max_translation_tokens:
                continue

            for token in value_tokens:
                if token and len(token) >= self.min_word_length:
                    counts[token] += 1

        return counts
