"""
Identifier decomposition and recomposition.

Splits source-code identifiers into word parts using a fixed delimiter
cascade (underscore, then hyphen, then camel/title case) and puts translated
parts back together in the shape of the original identifier.

Example:
    >>> splitter = IdentifierSplitter()
    >>> splitter.get_word_parts("kundenDaten_speichern")
    ['kunden', 'Daten', 'speichern']
    >>> splitter.convert_word_to_origin(
    ...     ["customer", "data", "save"],
    ...     ["kunden", "Daten", "speichern"],
    ...     "kundenDaten_speichern",
    ... )
    'customer_Data_save'
"""

import re
from enum import Enum

UNDERSCORE_DELIMITER = "_"
HYPHEN_DELIMITER = "-"

# Boundary before an uppercase letter that does not continue an uppercase run,
# or before the uppercase letter that starts a word after an acronym
# ("HTTPRequest" -> "HTTP", "Request"). German umlauts count as letters.
CAMEL_CASE_BOUNDARY = re.compile(
    r"(?<!^)(?<![A-ZÄÖÜ])(?=[A-ZÄÖÜ])|(?<!^)(?=[A-ZÄÖÜ][a-zäöüß])"
)


class DelimiterKind(str, Enum):
    """Lexical shape of an identifier, used to pick the reassembly strategy."""

    UNDERSCORE = "underscore"
    HYPHEN = "hyphen"
    CAMEL_CASE = "camel_case"
    NONE = "none"


_JOINERS: dict[DelimiterKind, str] = {
    DelimiterKind.UNDERSCORE: UNDERSCORE_DELIMITER,
    DelimiterKind.HYPHEN: HYPHEN_DELIMITER,
    DelimiterKind.CAMEL_CASE: "",
    DelimiterKind.NONE: "",
}


def split_camel_case(word: str) -> list[str]:
    """Split a single fragment on camel/title-case boundaries."""
    return CAMEL_CASE_BOUNDARY.split(word)


class IdentifierSplitter:
    """Decomposes identifiers into word parts and reassembles them.

    The cascade is applied in a fixed order so that classification and
    splitting always agree: underscore wins over hyphen, hyphen wins over
    camel case.

    Empty fragments (from leading, trailing or doubled delimiters) are kept
    in the part list. They are never translated, and reassembly skips them
    while still emitting the surrounding delimiters, so ``"_intern"`` comes
    back as ``"_intern"``.
    """

    def get_word_parts(self, identifier: str) -> list[str]:
        """Split an identifier into its ordered word parts.

        Args:
            identifier: Raw identifier, e.g. ``"kundenDatenSpeichern"``

        Returns:
            Word parts with original casing. Never empty; an identifier
            without delimiters yields ``[identifier]``.
        """
        parts = [identifier]

        if UNDERSCORE_DELIMITER in identifier:
            parts = identifier.split(UNDERSCORE_DELIMITER)

        if HYPHEN_DELIMITER in identifier:
            parts = [piece for part in parts for piece in part.split(HYPHEN_DELIMITER)]

        return [piece for part in parts for piece in split_camel_case(part)]

    def get_delimiter(self, identifier: str) -> DelimiterKind:
        """Classify an identifier by the delimiter cascade."""
        if UNDERSCORE_DELIMITER in identifier:
            return DelimiterKind.UNDERSCORE
        if HYPHEN_DELIMITER in identifier:
            return DelimiterKind.HYPHEN
        if len(split_camel_case(identifier)) > 1:
            return DelimiterKind.CAMEL_CASE
        return DelimiterKind.NONE

    def convert_word_to_origin(
        self,
        translated_parts: list[str],
        origin_parts: list[str],
        origin_identifier: str,
    ) -> str:
        """Rebuild an identifier from translated parts in the origin's shape.

        A translated part is capitalized when its origin part starts with an
        uppercase letter. Hyphen and underscore identifiers get their
        delimiter between parts; camel-case and plain identifiers are joined
        directly, the capitalization restoring the camel humps.

        Args:
            translated_parts: Parts to assemble, aligned with origin_parts
            origin_parts: Parts of the original identifier
            origin_identifier: The original identifier (used for its shape)

        Returns:
            The reassembled identifier
        """
        joiner = _JOINERS[self.get_delimiter(origin_identifier)]
        last_index = len(translated_parts) - 1
        segments: list[str] = []

        for index, translated in enumerate(translated_parts):
            origin = origin_parts[index]
            if origin:
                if origin[0].isupper():
                    translated = translated[:1].upper() + translated[1:]
                segments.append(translated)
            if joiner and index < last_index:
                segments.append(joiner)

        return "".join(segments)
