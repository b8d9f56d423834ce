"""
Tests for TranslationStorage - file import and export.
"""

from pathlib import Path

import pytest

from ident_translator.config import Settings
from ident_translator.storage import StorageError, TranslationStorage
from ident_translator.translation import TranslationMemory, TranslationResult, TranslationStatus


@pytest.fixture
def storage(settings: Settings) -> TranslationStorage:
    return TranslationStorage(settings)


class TestImport:

    def test_load_dictionary(self, storage: TranslationStorage) -> None:
        dictionary = storage.load_dictionary()

        # comment line and the line without a tab are skipped
        assert len(dictionary) == 13
        first = next(dictionary.german_entries())
        assert first.german == "speichern"
        assert first.english == "to save [comp.]"

    def test_dictionary_is_lowercased(self, storage: TranslationStorage) -> None:
        dictionary = storage.load_dictionary()

        germans = [entry.german for entry in dictionary.german_entries()]
        assert "kunde {m}" in germans
        assert dictionary.contains_english("customer")

    def test_dictionary_inverse_mapping(self, storage: TranslationStorage) -> None:
        inverse = storage.load_dictionary().english_to_german

        assert inverse["to load"] == "laden"

    def test_missing_dictionary_raises(self, tmp_path: Path) -> None:
        storage = TranslationStorage(Settings(resource_dir=tmp_path))

        with pytest.raises(StorageError):
            storage.load_dictionary()

    def test_load_word_source_deduplicates(self, storage: TranslationStorage) -> None:
        identifiers = storage.load_word_source()

        assert identifiers == [
            "kundenDaten_speichern",
            "KundenListe",
            "groesse",
            "12345",
            "customer",
            "zzzzUnbekannt",
        ]

    def test_missing_memory_is_empty(self, storage: TranslationStorage) -> None:
        memory = storage.load_memory()

        assert len(memory) == 0

    def test_load_memory(self, storage: TranslationStorage, settings: Settings) -> None:
        settings.memory_path.write_text("kunde;customer\nunbekannt;\nfehlt\n\n", encoding="utf-8")

        memory = storage.load_memory()

        assert memory.to_dict() == {"kunde": "customer", "unbekannt": "", "fehlt": ""}


class TestExport:

    def test_export_output_splits_files(self, storage: TranslationStorage, settings: Settings) -> None:
        results = [
            TranslationResult(source="KundenListe", translation="CustomersList", status=TranslationStatus.TRANSLATED),
            TranslationResult(source="zzzzUnbekannt", status=TranslationStatus.UNTRANSLATED),
        ]

        counts = storage.export_output(results)

        assert counts == (1, 1)
        assert settings.output_path.read_text(encoding="utf-8") == "KundenListe;CustomersList\n"
        assert settings.untranslated_path.read_text(encoding="utf-8") == "zzzzUnbekannt;\n"

    def test_export_overwrites(self, storage: TranslationStorage, settings: Settings) -> None:
        settings.output_path.write_text("alt;old\n", encoding="utf-8")

        storage.export_output([])

        assert settings.output_path.read_text(encoding="utf-8") == ""

    def test_memory_round_trip(self, storage: TranslationStorage) -> None:
        memory = TranslationMemory({"kunde": "customer", "unbekannt": ""})

        assert storage.export_memory(memory) == 2
        reloaded = storage.load_memory()

        assert reloaded.to_dict() == {"kunde": "customer", "unbekannt": ""}

    def test_custom_separator(self, resource_dir: Path) -> None:
        settings = Settings(resource_dir=resource_dir, separator="|")
        storage = TranslationStorage(settings)

        storage.export_memory(TranslationMemory({"kunde": "customer"}))

        assert settings.memory_path.read_text(encoding="utf-8") == "kunde|customer\n"

    def test_export_creates_directories(self, tmp_path: Path) -> None:
        settings = Settings(resource_dir=tmp_path / "nested" / "out")

        TranslationStorage(settings).export_memory(TranslationMemory())

        assert settings.memory_path.exists()
