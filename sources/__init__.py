"""Verse sources: CSV exports, the API.Bible client and text resolution."""

from sources.bible_api import (
    BIBLE_API_BASE,
    CACHE_DURATION,
    BibleApiClient,
    ResponseCache,
)
from sources.csv_source import (
    fetch_csv,
    load_csv_file,
    load_verses,
    parse_csv,
    parse_csv_line,
)
from sources.references import BOOK_CODES, book_code, format_verse_reference
from sources.resolver import VerseResolver, local_text

__all__ = [
    # CSV
    "parse_csv",
    "parse_csv_line",
    "fetch_csv",
    "load_csv_file",
    "load_verses",
    # API.Bible
    "BIBLE_API_BASE",
    "CACHE_DURATION",
    "BibleApiClient",
    "ResponseCache",
    # References
    "BOOK_CODES",
    "book_code",
    "format_verse_reference",
    # Resolution
    "VerseResolver",
    "local_text",
]
