"""
Dictionary-based translation of German words into English.

Components:
- BilingualDictionary: Ordered German/English phrase list
- TranslationMemory: Memoization cache persisted between runs
- WordTranslator: Interface for translators
- DictionaryTranslator: Frequency-scoring dict.cc translator
- GermanDecompounder: Compound word splitting via CharSplit
- TranslatabilityFilter: Skips numbers and identifiers that are already English

Usage:
    from ident_translator.translation import (
        BilingualDictionary, DictionaryTranslator, TranslationMemory,
    )

    dictionary = BilingualDictionary.from_pairs(pairs)
    memory = TranslationMemory()
    translator = DictionaryTranslator()

    result = translator.translate("speichern", dictionary, memory)
"""

from .base import WordTranslator
from .decompounder import Decompounder, GermanDecompounder
from .dict_translator import DictionaryTranslator
from .filter import TranslatabilityFilter
from .memory import NOT_FOUND, TranslationMemory, TranslationMemoryStats
from .models import (
    BilingualDictionary,
    DictionaryEntry,
    TranslationResult,
    TranslationStatus,
    WordTranslation,
)

__all__ = [
    # Translators
    "WordTranslator",
    "DictionaryTranslator",
    "Decompounder",
    "GermanDecompounder",
    "TranslatabilityFilter",
    # Memory
    "NOT_FOUND",
    "TranslationMemory",
    "TranslationMemoryStats",
    # Models
    "BilingualDictionary",
    "DictionaryEntry",
    "TranslationResult",
    "TranslationStatus",
    "WordTranslation",
]
