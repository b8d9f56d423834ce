"""
File import and export for translation runs.

All files are UTF-8 text:
- Dictionary: ``german<TAB>english[<TAB>...]`` per line (dict.cc export);
  lines starting with ``#`` and lines with fewer than two fields are skipped.
- Word source: one identifier per line.
- Translation memory: ``word;translation`` per line; ``word;`` or ``word``
  alone means the word was searched without result.
- Output: ``identifier;translation`` lines, split into a translated and an
  untranslated file.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .config import Settings
from .translation import BilingualDictionary, DictionaryEntry, TranslationMemory, TranslationResult

logger = logging.getLogger("ident-translator.storage")


class StorageError(Exception):
    """Raised when a required input file is missing or unreadable."""


class TranslationStorage:
    """Reads and writes the files of a translation run.

    Attributes:
        settings: Settings providing file locations and the separator.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def load_dictionary(self) -> BilingualDictionary:
        """Import the German/English dictionary, lowercasing both sides.

        Raises:
            StorageError: If the dictionary file cannot be read.
        """
        path = self.settings.dictionary_path
        logger.info(f"Importing dictionary from {path}")

        entries: list[DictionaryEntry] = []
        skipped = 0
        for line in self._read_lines(path):
            if not line or line.startswith("#"):
                continue
            fields = line.split("\t")
            if len(fields) < 2:
                skipped += 1
                logger.debug(f"Skipping malformed dictionary line: {line!r}")
                continue
            entries.append(DictionaryEntry(german=fields[0].lower(), english=fields[1].lower()))

        dictionary = BilingualDictionary(entries)
        logger.info(f"Imported {len(dictionary)} dictionary entries ({skipped} malformed lines skipped)")
        return dictionary

    def load_word_source(self) -> list[str]:
        """Import the identifiers to translate, without duplicates.

        Raises:
            StorageError: If the word source file cannot be read.
        """
        path = self.settings.source_path
        logger.info(f"Importing word source from {path}")

        identifiers = list(dict.fromkeys(
            line.strip() for line in self._read_lines(path) if line.strip()
        ))
        logger.info(f"Imported {len(identifiers)} identifiers")
        return identifiers

    def load_memory(self) -> TranslationMemory:
        """Import the translation memory of previous runs.

        A missing memory file yields an empty memory.
        """
        path = self.settings.memory_path
        if not path.exists():
            logger.info(f"No translation memory at {path}, starting empty")
            return TranslationMemory()

        entries: dict[str, str] = {}
        for line in self._read_lines(path):
            if not line:
                continue
            word, _, translation = line.partition(self.settings.separator)
            entries[word] = translation

        memory = TranslationMemory(entries)
        logger.info(f"Imported {len(memory)} remembered translations from {path}")
        return memory

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_output(self, results: Iterable[TranslationResult]) -> tuple[int, int]:
        """Write translated and untranslated identifiers to their files.

        Returns:
            Number of (translated, untranslated) lines written.
        """
        separator = self.settings.separator
        translated: list[str] = []
        untranslated: list[str] = []
        for result in results:
            line = f"{result.source}{separator}{result.translation}"
            (translated if result.translation else untranslated).append(line)

        self._write_lines(self.settings.output_path, translated)
        self._write_lines(self.settings.untranslated_path, untranslated)
        logger.info(
            f"Exported {len(translated)} translated identifiers to {self.settings.output_path} "
            f"and {len(untranslated)} untranslated to {self.settings.untranslated_path}"
        )
        return len(translated), len(untranslated)

    def export_memory(self, memory: TranslationMemory) -> int:
        """Persist the translation memory for the next run.

        Returns:
            Number of entries written.
        """
        separator = self.settings.separator
        lines = [f"{word}{separator}{translation}" for word, translation in memory.items()]
        self._write_lines(self.settings.memory_path, lines)
        logger.info(f"Exported {len(lines)} remembered translations to {self.settings.memory_path}")
        return len(lines)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_lines(path: Path) -> list[str]:
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    @staticmethod
    def _write_lines(path: Path, lines: list[str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = "\n".join(lines) + "\n" if lines else ""
        path.write_text(content, encoding="utf-8")
