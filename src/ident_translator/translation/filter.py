"""
Pre-translation filter for identifiers.

Pure numbers and identifiers whose parts are all English already need no
translation; dropping them early saves dictionary scans.
"""

import logging
import re
from collections.abc import Iterable

from ..wordprocessing import IdentifierSplitter
from .models import BilingualDictionary

logger = logging.getLogger("ident-translator")

DIGITS_ONLY = re.compile(r"^\d+$")


class TranslatabilityFilter:
    """Decides whether an identifier is a translation candidate.

    Args:
        dictionary: Dictionary whose English side identifies English words.
        splitter: Splitter used to break identifiers into parts.
    """

    def __init__(
        self,
        dictionary: BilingualDictionary,
        splitter: IdentifierSplitter | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.splitter = splitter or IdentifierSplitter()

    def check_word_is_translatable(self, word: str) -> bool:
        """Check a single word part.

        A word is not translatable if it is empty, consists of digits only,
        or if it (or its infinitive form ``"to <word>"``) is already an
        English phrase of the dictionary.
        """
        if not word or DIGITS_ONLY.match(word):
            return False

        lowered = word.lower()
        return not (
            self.dictionary.contains_english(lowered)
            or self.dictionary.contains_english(f"to {lowered}")
        )

    def is_translatable(self, identifier: str) -> bool:
        """An identifier is translatable if any of its parts is."""
        return any(
            self.check_word_is_translatable(part)
            for part in self.splitter.get_word_parts(identifier)
        )

    def filter_identifiers(self, identifiers: Iterable[str]) -> list[str]:
        """Return the translatable identifiers, keeping their order.

        The input is not modified.
        """
        identifiers = list(identifiers)
        kept = [identifier for identifier in identifiers if self.is_translatable(identifier)]
        logger.info(
            f"Filtered word source: {len(kept)} of {len(identifiers)} identifiers need translation"
        )
        return kept
