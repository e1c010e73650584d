"""Decide which text to show for a verse.

With the API version enabled the verse is fetched from API.Bible in the
selected translation. Any failure falls back to the verse's own text so the
games stay playable.
"""

import logging
from typing import Callable

from errors import BibleApiError
from models import ResolvedVerse, Settings, Verse
from sources.bible_api import BibleApiClient, ResponseCache
from sources.references import format_verse_reference

logger = logging.getLogger(__name__)


class VerseResolver:
    """Resolves verses to display text.

    Args:
        client_factory: Builds an API client for a given API key. One client
            is kept per key. Defaults to clients reading and writing ``cache``.
        cache: Response cache shared by the default clients, so switching
            API keys keeps what was already fetched.
    """

    def __init__(
        self,
        client_factory: Callable[[str], BibleApiClient] | None = None,
        cache: ResponseCache | None = None,
    ):
        self.cache = cache if cache is not None else ResponseCache()
        self.client_factory = client_factory or self._default_client
        self._clients: dict[str, BibleApiClient] = {}

    def _default_client(self, api_key: str) -> BibleApiClient:
        return BibleApiClient(api_key, cache=self.cache)

    def client_for(self, api_key: str) -> BibleApiClient:
        if api_key not in self._clients:
            self._clients[api_key] = self.client_factory(api_key)
        return self._clients[api_key]

    def clear_cache(self) -> None:
        """Forget cached responses for every API key."""
        self.cache.clear()
        for client in self._clients.values():
            client.clear_cache()

    def resolve(self, verse: Verse, settings: Settings) -> ResolvedVerse:
        """Return the text, reference and version to display for a verse."""
        if not settings.wants_api_text:
            return local_text(verse)

        verse_id = format_verse_reference(verse.reference)
        try:
            client = self.client_for(settings.bible_api_key)
            api_verse = client.get_verse(settings.selected_bible_id, verse_id)
            content = api_verse.get("content")
            if not isinstance(content, str) or not content.strip():
                raise BibleApiError(f"Empty content for {verse_id}")
        except BibleApiError as e:
            logger.warning(
                "Error loading %s from the API, using local text: %s",
                verse.reference,
                e,
            )
            return local_text(verse)

        return ResolvedVerse(
            text=content.strip(),
            reference=verse.reference,
            version=settings.selected_bible_id,
        )


def local_text(verse: Verse) -> ResolvedVerse:
    """The verse as it came from the verse source."""
    return ResolvedVerse(
        text=verse.text.strip(),
        reference=verse.reference,
        version=verse.version,
    )
