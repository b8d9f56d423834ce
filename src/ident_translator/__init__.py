"""
ident-translator - Translates German source-code identifiers into English.
"""

from .config import Settings, SettingsError, load_settings
from .storage import StorageError, TranslationStorage
from .translation import (
    BilingualDictionary,
    DictionaryTranslator,
    TranslatabilityFilter,
    TranslationMemory,
    TranslationResult,
    TranslationStatus,
)
from .wordprocessing import DelimiterKind, IdentifierSplitter, TextCleaner
from .workflow import RunReport, TranslationWorkflow

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("ident-translator")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "BilingualDictionary",
    "DelimiterKind",
    "DictionaryTranslator",
    "IdentifierSplitter",
    "RunReport",
    "Settings",
    "SettingsError",
    "StorageError",
    "TextCleaner",
    "TranslatabilityFilter",
    "TranslationMemory",
    "TranslationResult",
    "TranslationStatus",
    "TranslationStorage",
    "TranslationWorkflow",
    "load_settings",
]
