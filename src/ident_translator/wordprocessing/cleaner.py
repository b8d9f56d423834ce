"""
Text normalization for dict.cc style dictionaries and identifier fragments.
"""

import re

# Applied in this order, each rule on the result of the previous one.
GERMAN_CHAR_RULES: tuple[tuple[str, str], ...] = (
    ("ae", "ä"),
    ("ue", "ü"),
    ("oe", "ö"),
    ("Ae", "Ä"),
    ("Ue", "Ü"),
    ("Oe", "Ö"),
    ("AE", "Ä"),
    ("UE", "Ü"),
    ("OE", "Ö"),
    ("ss", "ß"),
    ("SS", "ß"),
)

# Annotations, abbreviations and articles stripped from dictionary phrases.
REMOVE_RULES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[.*\]"),
    re.compile(r"\(.*\)"),
    re.compile(r"<.*>"),
    re.compile(r"\{.*\}"),
    re.compile(r"/"),
    re.compile(re.escape("sth.")),
    re.compile(re.escape("sb.")),
    re.compile(r"^\s*the "),
)


class TextCleaner:
    """Normalizes dictionary phrases and raw identifier fragments.

    Example:
        >>> cleaner = TextCleaner()
        >>> cleaner.clean_translation("(coll.) to go [up]")
        'to go'
        >>> cleaner.clean_word_to_translate("Groesse")
        'Größe'
    """

    def clean_word_to_translate(self, fragment: str) -> str:
        """Replace German digraph spellings with umlauts and sharp s.

        Identifiers are usually written in ASCII (``"Groesse"``), while the
        dictionary uses the real spelling (``"größe"``).

        Args:
            fragment: Raw identifier fragment

        Returns:
            The fragment with substitutions applied, whitespace trimmed
        """
        cleaned = fragment
        for digraph, replacement in GERMAN_CHAR_RULES:
            cleaned = cleaned.replace(digraph, replacement)
        return cleaned.strip()

    def clean_translation(self, phrase: str) -> str:
        """Strip dict.cc annotations from a dictionary key or value.

        Lowercases the phrase, then removes bracketed annotations
        (``[...]``, ``(...)``, ``<...>``, ``{...}``), slashes, the ``sth.``
        and ``sb.`` placeholders and a leading ``the ``.

        Args:
            phrase: Dictionary phrase, e.g. ``"to go [coll.]"``

        Returns:
            The cleaned phrase, e.g. ``"to go"``
        """
        cleaned = phrase.lower()
        for rule in REMOVE_RULES:
            cleaned = rule.sub("", cleaned)
        return cleaned.strip()
