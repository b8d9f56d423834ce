"""
Word processing for source-code identifiers.

Splits identifiers into word parts, reassembles translated parts in the
original shape, and normalizes dictionary phrases and German spellings.
"""

from .cleaner import TextCleaner
from .splitter import DelimiterKind, IdentifierSplitter

__all__ = ["DelimiterKind", "IdentifierSplitter", "TextCleaner"]
