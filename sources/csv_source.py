"""Load verses from a spreadsheet CSV export.

Expected columns, in order: verse text, bible version, verse reference.
The first line is a header and is skipped. A double quote anywhere in a
field toggles quoting and is dropped; commas inside quotes are kept, and
``""`` inside quotes is a literal quote. Spaces around fields are kept
here and stripped when building verses.
"""

import logging
from pathlib import Path

import requests

from errors import VerseSourceError
from models import Verse

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10  # seconds


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into its fields.

    Quotes may open or close mid-field, so ``say "Go, now",ESV`` is two
    fields. Never fails; an unbalanced quote runs to the end of the line.
    """
    fields = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and line[i + 1 : i + 2] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def parse_csv(csv_text: str) -> list[Verse]:
    """Parse CSV text into verses.

    Lines with fewer than three fields are dropped. Verse ids are
    ``verse-<n>`` where ``n`` is the line number among non-blank lines.
    """
    lines = [line for line in csv_text.split("\n") if line.strip()]
    if len(lines) < 2:
        return []

    verses = []
    for i, line in enumerate(lines[1:], start=1):
        values = parse_csv_line(line.rstrip("\r"))
        if len(values) < 3:
            logger.debug("Skipping CSV line %d with %d fields", i, len(values))
            continue

        verses.append(
            Verse(
                id=f"verse-{i}",
                text=values[0].strip(),
                version=values[1].strip(),
                reference=values[2].strip(),
            )
        )

    return verses


def fetch_csv(url: str, http: requests.Session | None = None) -> list[Verse]:
    """Download a published CSV and parse it.

    Raises:
        VerseSourceError: If the download fails or returns a non-2xx status.
    """
    http = http or requests.Session()
    try:
        response = http.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.error("Error fetching CSV from %s: %s", url, e)
        raise VerseSourceError(f"Could not fetch {url}") from e

    if not response.ok:
        logger.error("Error fetching CSV from %s: HTTP %s", url, response.status_code)
        raise VerseSourceError(f"HTTP error! status: {response.status_code}")

    return parse_csv(response.text)


def load_csv_file(path: Path) -> list[Verse]:
    """Read verses from a CSV file on disk."""
    try:
        with open(path, encoding="utf-8") as f:
            return parse_csv(f.read())
    except OSError as e:
        logger.error("Error reading CSV file %s: %s", path, e)
        raise VerseSourceError(f"Could not read {path}") from e


def load_verses(location: str, http: requests.Session | None = None) -> list[Verse]:
    """Load verses from a URL or a local file path."""
    if location.startswith(("http://", "https://")):
        return fetch_csv(location, http)
    return load_csv_file(Path(location).expanduser())
