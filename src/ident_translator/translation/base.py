"""
Interface for word translators.

All translators (currently the dict.cc based DictionaryTranslator) implement
this interface, so the workflow can treat them uniformly. Dictionary data
and the translation memory are passed into every call; the translator
itself holds no run state.
"""

from abc import ABC, abstractmethod

from .memory import TranslationMemory
from .models import BilingualDictionary, WordTranslation


class WordTranslator(ABC):
    """Translates single German words into English.

    Subclasses must implement:
    - name: A human-readable translator name.
    - translate(): Translate one word against a dictionary.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable translator name."""
        ...

    @abstractmethod
    def translate(
        self,
        word: str,
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> WordTranslation:
        """Translate a word.

        Args:
            word: The German word to translate.
            dictionary: Bilingual dictionary to search.
            memory: Translation memory, read and updated in place.

        Returns:
            WordTranslation with status TRANSLATED, NOT_FOUND or INVALID.
        """
        ...
