"""Convert human verse references to API.Bible verse ids.

"John 3:16" becomes "JHN.3.16" and "1 Corinthians 13:4-7" becomes
"1CO.13.4-1CO.13.7".
"""

import re

REFERENCE_RE = re.compile(r"^(\d?\s?[A-Za-z]+)\s+(\d+):(\d+)(?:-(\d+))?")

BOOK_CODES = {
    # Old Testament
    "Genesis": "GEN",
    "Exodus": "EXO",
    "Leviticus": "LEV",
    "Numbers": "NUM",
    "Deuteronomy": "DEU",
    "Joshua": "JOS",
    "Judges": "JDG",
    "Ruth": "RUT",
    "1 Samuel": "1SA",
    "2 Samuel": "2SA",
    "1 Kings": "1KI",
    "2 Kings": "2KI",
    "1 Chronicles": "1CH",
    "2 Chronicles": "2CH",
    "Ezra": "EZR",
    "Nehemiah": "NEH",
    "Esther": "EST",
    "Job": "JOB",
    "Psalm": "PSA",
    "Psalms": "PSA",
    "Proverbs": "PRO",
    "Ecclesiastes": "ECC",
    "Isaiah": "ISA",
    "Jeremiah": "JER",
    "Lamentations": "LAM",
    "Ezekiel": "EZK",
    "Daniel": "DAN",
    "Hosea": "HOS",
    "Joel": "JOL",
    "Amos": "AMO",
    "Obadiah": "OBA",
    "Jonah": "JON",
    "Micah": "MIC",
    "Nahum": "NAM",
    "Habakkuk": "HAB",
    "Zephaniah": "ZEP",
    "Haggai": "HAG",
    "Zechariah": "ZEC",
    "Malachi": "MAL",
    # New Testament
    "Matthew": "MAT",
    "Mark": "MRK",
    "Luke": "LUK",
    "John": "JHN",
    "Acts": "ACT",
    "Romans": "ROM",
    "1 Corinthians": "1CO",
    "2 Corinthians": "2CO",
    "Galatians": "GAL",
    "Ephesians": "EPH",
    "Philippians": "PHP",
    "Colossians": "COL",
    "1 Thessalonians": "1TH",
    "2 Thessalonians": "2TH",
    "1 Timothy": "1TI",
    "2 Timothy": "2TI",
    "Titus": "TIT",
    "Philemon": "PHM",
    "Hebrews": "HEB",
    "James": "JAS",
    "1 Peter": "1PE",
    "2 Peter": "2PE",
    "1 John": "1JN",
    "2 John": "2JN",
    "3 John": "3JN",
    "Jude": "JUD",
    "Revelation": "REV",
}


def book_code(book: str) -> str:
    """Look up a book's code, or use its first three letters uppercased."""
    return BOOK_CODES.get(book, book[:3].upper())


def format_verse_reference(reference: str) -> str:
    """Turn a reference like "Romans 8:28" into an API verse id.

    References that don't look like "Book chapter:verse[-end]" are returned
    unchanged; the lookup then fails and the caller falls back to local text.
    """
    match = REFERENCE_RE.match(reference)
    if not match:
        return reference

    book = match.group(1).strip()
    chapter = match.group(2)
    verse_start = match.group(3)
    verse_end = match.group(4)

    code = book_code(book)
    if verse_end:
        return f"{code}.{chapter}.{verse_start}-{code}.{chapter}.{verse_end}"
    return f"{code}.{chapter}.{verse_start}"
