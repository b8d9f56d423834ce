"""
Unit tests for TextCleaner - dictionary phrase and German spelling normalization.
"""

import pytest

from ident_translator.wordprocessing import TextCleaner


@pytest.fixture
def cleaner() -> TextCleaner:
    return TextCleaner()


class TestCleanTranslation:
    """dict.cc annotation stripping."""

    def test_bracket_annotations_removed(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("(coll.) to go [up]") == "to go"

    @pytest.mark.parametrize(
        "phrase,expected",
        [
            ("to save [comp.]", "to save"),
            ("Kunde {m}", "kunde"),
            ("data <dat.>", "data"),
            ("to store (data)", "to store"),
        ],
    )
    def test_each_bracket_kind(self, cleaner: TextCleaner, phrase: str, expected: str) -> None:
        assert cleaner.clean_translation(phrase) == expected

    def test_bracket_match_is_greedy(self, cleaner: TextCleaner) -> None:
        """Everything between the first opening and last closing bracket goes."""
        assert cleaner.clean_translation("to [a] save [b]") == "to"

    def test_lowercases(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("Customer") == "customer"

    def test_slash_and_placeholders_removed(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("to save sth.") == "to save"
        assert cleaner.clean_translation("to help sb.") == "to help"
        assert cleaner.clean_translation("input/output") == "inputoutput"

    def test_placeholders_are_literal(self, cleaner: TextCleaner) -> None:
        """'sth.' is matched literally, not as a pattern."""
        assert cleaner.clean_translation("sthx") == "sthx"

    def test_leading_article_removed(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("the customer") == "customer"
        assert cleaner.clean_translation("[comp.] the list") == "list"

    def test_inner_article_kept(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("list of the customers") == "list of the customers"

    def test_whitespace_trimmed(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_translation("  data  ") == "data"


class TestCleanWordToTranslate:
    """German digraph to umlaut normalization."""

    @pytest.mark.parametrize(
        "fragment,expected",
        [
            ("groesse", "größe"),
            ("Groesse", "Größe"),
            ("Aenderung", "Änderung"),
            ("Uebersicht", "Übersicht"),
            ("Oeffnen", "Öffnen"),
            ("AENDERN", "ÄNDERN"),
            ("GRUESSE", "GRÜßE"),
            ("strasse", "straße"),
            ("kunde", "kunde"),
        ],
    )
    def test_substitutions(self, cleaner: TextCleaner, fragment: str, expected: str) -> None:
        assert cleaner.clean_word_to_translate(fragment) == expected

    def test_trimmed(self, cleaner: TextCleaner) -> None:
        assert cleaner.clean_word_to_translate("  laden ") == "laden"
