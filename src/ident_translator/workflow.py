"""
Translation workflow: import, filter, translate, export.

The workflow owns the run state. It loads the dictionary and the translation
memory, hands both to the translator for every word, and writes the memory
back at the end, so the translator itself stays stateless.
"""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

from .config import Settings
from .storage import TranslationStorage
from .translation import (
    BilingualDictionary,
    DictionaryTranslator,
    GermanDecompounder,
    TranslatabilityFilter,
    TranslationMemory,
    TranslationResult,
    TranslationStatus,
    WordTranslator,
)
from .wordprocessing import IdentifierSplitter, TextCleaner

logger = logging.getLogger("ident-translator")


@dataclass
class RunReport:
    """Summary of a translation run.

    Attributes:
        source_count: Identifiers imported from the word source.
        filtered_count: Identifiers left after filtering.
        translated_count: Identifiers with every part translated.
        partial_count: Identifiers with some parts translated.
        untranslated_count: Identifiers without any translated part.
        memory_size: Entries in the translation memory after the run.
        memory_hits: Lookups answered from memory.
        memory_misses: Lookups that required a dictionary scan.
        duration_seconds: Wall time of the translation step.
    """
    source_count: int = 0
    filtered_count: int = 0
    translated_count: int = 0
    partial_count: int = 0
    untranslated_count: int = 0
    memory_size: int = 0
    memory_hits: int = 0
    memory_misses: int = 0
    duration_seconds: float = 0.0


def build_translator(settings: Settings) -> DictionaryTranslator:
    """Create the dictionary translator described by the settings."""
    decompounder = (
        GermanDecompounder(min_compound_length=settings.min_compound_length)
        if settings.decompose
        else None
    )
    return DictionaryTranslator(
        decompounder=decompounder,
        max_candidates=settings.max_candidates,
        min_word_length=settings.min_word_length,
        max_translation_tokens=settings.max_translation_tokens,
    )


class TranslationWorkflow:
    """Runs the identifier translation process.

    Usage:
        workflow = TranslationWorkflow(load_settings())
        report = workflow.run()

    Args:
        settings: Run settings.
        storage: File layer; defaults to TranslationStorage(settings).
        translator: Word translator; defaults to build_translator(settings).
    """

    def __init__(
        self,
        settings: Settings,
        storage: TranslationStorage | None = None,
        translator: WordTranslator | None = None,
    ) -> None:
        self.settings = settings
        self.storage = storage or TranslationStorage(settings)
        self.translator = translator or build_translator(settings)
        self.splitter = IdentifierSplitter()
        self.cleaner = TextCleaner()

    def run(self) -> RunReport:
        """Import, filter, translate and export.

        Raises:
            StorageError: If the dictionary or word source cannot be read.
        """
        logger.info("Start translation workflow")

        dictionary = self.storage.load_dictionary()
        identifiers = self.storage.load_word_source()
        memory = self.storage.load_memory()

        candidates = TranslatabilityFilter(dictionary, self.splitter).filter_identifiers(identifiers)

        start = time.monotonic()
        results = self.translate_identifiers(candidates, dictionary, memory)
        duration = time.monotonic() - start
        logger.info(f"Translated {len(results)} identifiers in {duration:.2f}s")

        self.storage.export_output(results)
        self.storage.export_memory(memory)

        stats = memory.get_stats()
        report = RunReport(
            source_count=len(identifiers),
            filtered_count=len(candidates),
            translated_count=sum(1 for r in results if r.status == TranslationStatus.TRANSLATED),
            partial_count=sum(1 for r in results if r.status == TranslationStatus.PARTIAL),
            untranslated_count=sum(1 for r in results if r.status == TranslationStatus.UNTRANSLATED),
            memory_size=stats.total_entries,
            memory_hits=stats.hit_count,
            memory_misses=stats.miss_count,
            duration_seconds=duration,
        )
        logger.info("End translation workflow")
        return report

    def translate_identifiers(
        self,
        identifiers: Iterable[str],
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> list[TranslationResult]:
        """Translate identifiers in order."""
        return [self.translate_identifier(identifier, dictionary, memory) for identifier in identifiers]

    def translate_identifier(
        self,
        identifier: str,
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> TranslationResult:
        """Translate one identifier part by part and reassemble it.

        Each part is tried as written first, then with German digraphs
        normalized (``"Groesse"`` -> ``"Größe"``). Parts without translation
        are kept unchanged.

        Returns:
            TranslationResult; its translation is "" if no part was translated.
        """
        parts = self.splitter.get_word_parts(identifier)
        translated_parts: list[str] = []
        found = 0
        translatable = 0

        for part in parts:
            translation = self._translate_part(part, dictionary, memory)
            if part:
                translatable += 1
            if translation:
                translated_parts.append(translation)
                found += 1
            else:
                translated_parts.append(part)

        if not found:
            logger.debug(f"Source: {identifier}\tTranslation: None")
            return TranslationResult(
                source=identifier,
                status=TranslationStatus.UNTRANSLATED,
                parts=parts,
                translated_parts=translated_parts,
            )

        translation = self.splitter.convert_word_to_origin(translated_parts, parts, identifier)
        status = TranslationStatus.TRANSLATED if found == translatable else TranslationStatus.PARTIAL
        logger.debug(f"Source: {identifier}\tTranslation: {translation} ({status.value})")
        return TranslationResult(
            source=identifier,
            translation=translation,
            status=status,
            parts=parts,
            translated_parts=translated_parts,
        )

    def _translate_part(
        self,
        part: str,
        dictionary: BilingualDictionary,
        memory: TranslationMemory,
    ) -> str:
        result = self.translator.translate(part, dictionary, memory)
        if result.found:
            return result.translation

        cleaned = self.cleaner.clean_word_to_translate(part)
        if cleaned != part:
            result = self.translator.translate(cleaned, dictionary, memory)
            if result.found:
                return result.translation
        return ""
