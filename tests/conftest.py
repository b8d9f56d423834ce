"""
Pytest configuration and fixtures for ident-translator tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing ident_translator
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ident_translator.config import Settings  # noqa: E402
from ident_translator.translation import BilingualDictionary, TranslationMemory  # noqa: E402


SAMPLE_PAIRS: list[tuple[str, str]] = [
    ("speichern", "to save [comp.]"),
    ("speichern", "to store [data]"),
    ("Kunde {m}", "customer"),
    ("Kunden {pl}", "customers"),
    ("Kunden {pl}", "clients"),
    ("Kunden {pl}", "customers"),
    ("Daten {pl}", "data"),
    ("Daten {pl}", "data [comp.]"),
    ("laden", "to load"),
    ("Größe {f}", "size"),
    ("Liste {f}", "list"),
    ("die Liste der Kunden ist sehr lang", "the list of customers is very long indeed"),
    ("berechnen", "to calculate"),
]


@pytest.fixture
def dictionary() -> BilingualDictionary:
    """Small dict.cc style dictionary."""
    return BilingualDictionary.from_pairs(SAMPLE_PAIRS)


@pytest.fixture
def memory() -> TranslationMemory:
    """Empty translation memory."""
    return TranslationMemory()


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Resource directory with a dictionary and a word source file."""
    directory = tmp_path / "resource"
    directory.mkdir()
    (directory / "GermanEnglishTranslations.txt").write_text(
        "# dict.cc export\n"
        + "".join(f"{german}\t{english}\tnoun\n" for german, english in SAMPLE_PAIRS)
        + "kaputte zeile ohne tab\n",
        encoding="utf-8",
    )
    (directory / "WordSource.txt").write_text(
        "kundenDaten_speichern\n"
        "KundenListe\n"
        "groesse\n"
        "12345\n"
        "customer\n"
        "\n"
        "zzzzUnbekannt\n"
        "KundenListe\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def settings(resource_dir: Path) -> Settings:
    """Settings pointing at the temporary resource directory, no decompounding."""
    return Settings(resource_dir=resource_dir, decompose=False)
