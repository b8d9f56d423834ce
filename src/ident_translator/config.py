"""
Settings for identifier translation runs.

Settings come from an optional YAML file; the resource directory and the
config file location can be overridden through environment variables
(``IDENT_TRANSLATOR_RESOURCE_DIR``, ``IDENT_TRANSLATOR_CONFIG``), which the
CLI loads from a ``.env`` file first.

Expected YAML format (all keys optional):
    resource_dir: resource
    dictionary_file: GermanEnglishTranslations.txt
    max_candidates: 40
    decompose: true
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger("ident-translator")

RESOURCE_DIR_ENV = "IDENT_TRANSLATOR_RESOURCE_DIR"
CONFIG_FILE_ENV = "IDENT_TRANSLATOR_CONFIG"


class SettingsError(Exception):
    """Raised when the settings file cannot be read or holds invalid values."""


class Settings(BaseModel):
    """Configuration of a translation run.

    File names are resolved relative to ``resource_dir``.
    """

    # Resources
    resource_dir: Path = Field(
        default=Path("resource"),
        description="Directory holding dictionary, word source, memory and output files"
    )
    dictionary_file: str = Field(
        default="GermanEnglishTranslations.txt",
        description="Tab-separated German/English dictionary (dict.cc export)"
    )
    source_file: str = Field(
        default="WordSource.txt",
        description="Identifiers to translate, one per line"
    )
    output_file: str = Field(
        default="WordOutput.txt",
        description="Translated identifiers"
    )
    untranslated_file: str = Field(
        default="WordOutputNotTranslated.txt",
        description="Identifiers without translation"
    )
    memory_file: str = Field(
        default="TranslationMemory.txt",
        description="Translation memory carried over between runs"
    )
    separator: str = Field(
        default=";",
        min_length=1,
        description="Separator between word and translation in memory and output files"
    )

    # Matching
    max_candidates: int = Field(
        default=40,
        ge=1,
        description="Stop scanning once more distinct tokens than this are scored"
    )
    min_word_length: int = Field(
        default=3,
        ge=1,
        description="Words must be longer, scored tokens at least this long"
    )
    max_translation_tokens: int = Field(
        default=4,
        ge=1,
        description="English phrases with more tokens are ignored"
    )

    # Decomposition
    decompose: bool = Field(
        default=True,
        description="Split German compounds that cannot be translated as a whole"
    )
    min_compound_length: int = Field(
        default=8,
        ge=2,
        description="Shorter words are never decompounded"
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """The separator must not collide with line structure."""
        if "\n" in v or "\t" in v:
            raise ValueError("separator must not contain tabs or newlines")
        return v

    @property
    def dictionary_path(self) -> Path:
        return self.resource_dir / self.dictionary_file

    @property
    def source_path(self) -> Path:
        return self.resource_dir / self.source_file

    @property
    def output_path(self) -> Path:
        return self.resource_dir / self.output_file

    @property
    def untranslated_path(self) -> Path:
        return self.resource_dir / self.untranslated_file

    @property
    def memory_path(self) -> Path:
        return self.resource_dir / self.memory_file


def load_settings(path: Path | None = None, **overrides) -> Settings:
    """Load settings from YAML and the environment.

    Precedence, lowest first: defaults, YAML file, ``IDENT_TRANSLATOR_RESOURCE_DIR``,
    explicit ``overrides`` (None values are ignored).

    Args:
        path: YAML settings file; falls back to ``IDENT_TRANSLATOR_CONFIG``.
        **overrides: Field values taking precedence over everything else.

    Returns:
        Validated Settings.

    Raises:
        SettingsError: If the file is missing, unreadable or invalid.
    """
    if path is None and os.getenv(CONFIG_FILE_ENV):
        path = Path(os.getenv(CONFIG_FILE_ENV, ""))

    data: dict = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise SettingsError(f"Malformed settings file {path}: {e}") from e

        if loaded is not None and not isinstance(loaded, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        data.update(loaded or {})
        logger.debug(f"Loaded settings from {path}")

    if resource_dir := os.getenv(RESOURCE_DIR_ENV, "").strip():
        data["resource_dir"] = resource_dir

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e
