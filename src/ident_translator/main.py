"""
Command line entry point for identifier translation.

Usage:
    ident-translate --resource-dir resource --verbose
    ident-translate --config translator.yaml --no-decompose
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import SettingsError, load_settings
from .storage import StorageError
from .workflow import TranslationWorkflow

logger = logging.getLogger("ident-translator")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ident-translate",
        description="Translate German source-code identifiers into English using a dict.cc dictionary.",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("--resource-dir", type=Path, help="Directory holding the input and output files")
    parser.add_argument("--dictionary", dest="dictionary_file", help="Dictionary file name")
    parser.add_argument("--source", dest="source_file", help="Word source file name")
    parser.add_argument("--output", dest="output_file", help="Translated output file name")
    parser.add_argument("--untranslated", dest="untranslated_file", help="Untranslated output file name")
    parser.add_argument("--memory", dest="memory_file", help="Translation memory file name")
    parser.add_argument(
        "--no-decompose",
        dest="decompose",
        action="store_false",
        default=None,
        help="Do not split German compound words",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every translated identifier")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the workflow; returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not load_dotenv():
        logger.debug("No .env file found, using environment and defaults")

    try:
        settings = load_settings(
            args.config,
            resource_dir=args.resource_dir,
            dictionary_file=args.dictionary_file,
            source_file=args.source_file,
            output_file=args.output_file,
            untranslated_file=args.untranslated_file,
            memory_file=args.memory_file,
            decompose=args.decompose,
        )
        report = TranslationWorkflow(settings).run()
    except (SettingsError, StorageError) as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info(
        f"✅ {report.translated_count} translated, {report.partial_count} partially translated, "
        f"{report.untranslated_count} untranslated of {report.filtered_count} candidates "
        f"({report.source_count} identifiers imported, {report.memory_size} remembered words)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
