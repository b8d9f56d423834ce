"""
German compound word decomposition.

Uses compound-split (CharSplit) to break compound nouns into their parts:
  "Kundendatenspeicher" -> "Kunden", "Daten", "Speicher"

CharSplit only proposes a single head/tail split per call, so the parts are
split again until no confident split remains.
"""

import logging
from abc import ABC, abstractmethod

from compound_split import char_split

logger = logging.getLogger("ident-translator")


class Decompounder(ABC):
    """Splits a compound word into its constituent words."""

    @abstractmethod
    def split(self, word: str) -> list[str]:
        """Split a word into parts.

        Returns:
            The parts in order; ``[word]`` if the word is not a compound.
        """
        ...


class GermanDecompounder(Decompounder):
    """CharSplit-based decompounder for German.

    Args:
        min_compound_length: Words shorter than this are never split.
        min_score: A split is accepted only if its score is above this.
    """

    def __init__(self, min_compound_length: int = 8, min_score: float = 0.0) -> None:
        self.min_compound_length = min_compound_length
        self.min_score = min_score

    def split(self, word: str) -> list[str]:
        if len(word) < self.min_compound_length:
            return [word]

        candidates = char_split.split_compound(word)
        if not candidates:
            return [word]

        score, head, tail = candidates[0]
        # CharSplit answers [0, word, word] when it has no split to offer
        if score <= self.min_score or not head or not tail or head.lower() == tail.lower():
            return [word]

        logger.debug(f"Decompounded '{word}' -> '{head}' + '{tail}' (score {score:.2f})")
        return self.split(head) + self.split(tail)
