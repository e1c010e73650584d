"""Tokenization and answer normalization shared by all games."""

import re

# Only these characters are ignored when comparing answers.
PUNCTUATION = ".,!?;:\"'"

_PUNCTUATION_RE = re.compile(f"[{re.escape(PUNCTUATION)}]")


def tokenize(text: str) -> list[str]:
    """Split verse text on runs of whitespace, keeping punctuation."""
    return text.split()


def normalize(text: str) -> str:
    """Lowercase, drop the comparison punctuation, then trim.

    Applying it twice gives the same result as applying it once.
    """
    return _PUNCTUATION_RE.sub("", text.lower()).strip()
