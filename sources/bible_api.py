"""Client for the API.Bible REST service, with a 24 hour response cache."""

import logging
import os
import time
from typing import Any, Callable
from urllib.parse import quote, urlencode

import requests

from errors import BibleApiError
from storage import KeyValueStore

logger = logging.getLogger(__name__)

BIBLE_API_BASE = "https://rest.api.bible/v1"
CACHE_KEY = "bibleApiCache"
CACHE_DURATION = 24 * 60 * 60  # seconds
REQUEST_TIMEOUT = 10  # seconds

# Plain verse text only: no notes, titles or numbering
VERSE_CONTENT_PARAMS = {
    "content-type": "text",
    "include-notes": "false",
    "include-titles": "false",
    "include-chapter-numbers": "false",
    "include-verse-numbers": "false",
    "include-verse-spans": "false",
}


class ResponseCache:
    """API responses by endpoint, persisted as one blob in the key/value store.

    The whole blob expires CACHE_DURATION seconds after it was last written.
    Writes merge with what is already stored, so caches sharing a store do
    not drop each other's entries.

    Args:
        store: Where the blob lives. None keeps responses in memory only.
        clock: Returns the current time in seconds.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.clock = clock
        self.entries: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        if self.store is None:
            return {}
        data = self.store.get(CACHE_KEY)
        if not isinstance(data, dict):
            return {}
        timestamp = data.get("timestamp", 0)
        if self.clock() - timestamp < CACHE_DURATION:
            return dict(data.get("cache") or {})
        return {}

    def __contains__(self, endpoint: str) -> bool:
        if endpoint not in self.entries:
            self.entries.update(self._load())
        return endpoint in self.entries

    def __getitem__(self, endpoint: str) -> Any:
        return self.entries[endpoint]

    def put(self, endpoint: str, data: Any) -> None:
        self.entries = {**self._load(), **self.entries, endpoint: data}
        if self.store is not None:
            self.store.set(CACHE_KEY, {"cache": self.entries, "timestamp": self.clock()})

    def clear(self) -> None:
        self.entries = {}
        if self.store is not None:
            self.store.delete(CACHE_KEY)


class BibleApiClient:
    """Fetches languages, bible versions and verses from API.Bible.

    Responses are cached by endpoint in a ResponseCache. Clients for
    different API keys can share one cache.

    Args:
        api_key: The user's API key. Falls back to BIBLE_API_KEY from the
            environment when empty.
        store: Where a new response cache lives when ``cache`` is not given.
            None disables persistence.
        http: Session used for requests.
        clock: Returns the current time in seconds.
        cache: An existing cache to use instead of building one.
    """

    def __init__(
        self,
        api_key: str = "",
        store: KeyValueStore | None = None,
        http: requests.Session | None = None,
        clock: Callable[[], float] = time.time,
        cache: ResponseCache | None = None,
    ):
        self.api_key = api_key
        self.http = http or requests.Session()
        self.cache = cache if cache is not None else ResponseCache(store, clock)

    @property
    def effective_key(self) -> str:
        """The user's key, or the default key from the environment."""
        return self.api_key or os.environ.get("BIBLE_API_KEY", "")

    def request(self, endpoint: str) -> Any:
        """GET an endpoint, serving repeated calls from the cache.

        Raises:
            BibleApiError: On transport errors, non-2xx statuses or bodies
                that are not JSON.
        """
        if endpoint in self.cache:
            return self.cache[endpoint]

        try:
            response = self.http.get(
                f"{BIBLE_API_BASE}{endpoint}",
                headers={"api-key": self.effective_key},
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error("Bible API request failed: %s", e)
            raise BibleApiError(f"Request to {endpoint} failed") from e

        if not response.ok:
            logger.error("Bible API request failed: HTTP %s", response.status_code)
            raise BibleApiError(
                f"API error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise BibleApiError(f"Malformed response from {endpoint}") from e

        self.cache.put(endpoint, data)
        return data

    def get_languages(self) -> list[dict]:
        """Get the list of available languages."""
        return _data_list(self.request("/bibles/languages"))

    def get_bibles(self, language: str = "eng") -> list[dict]:
        """Get the bible versions available in a language."""
        return _data_list(self.request(f"/bibles?{urlencode({'language': language})}"))

    def get_verse(self, bible_id: str, verse_id: str) -> dict:
        """Get one verse or verse range as plain text.

        Args:
            bible_id: API.Bible version id.
            verse_id: Verse id such as "JHN.3.16" or "1CO.13.4-1CO.13.7".

        Returns:
            The response's ``data`` object; the text is under ``content``.
        """
        endpoint = (
            f"/bibles/{quote(bible_id)}/verses/{quote(verse_id)}"
            f"?{urlencode(VERSE_CONTENT_PARAMS)}"
        )
        data = self.request(endpoint)
        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            raise BibleApiError(f"No verse data for {verse_id}")
        return data["data"]

    def search_verse(self, bible_id: str, query: str) -> Any:
        """Search a bible for a passage matching free text or a reference."""
        endpoint = (
            f"/bibles/{quote(bible_id)}/search"
            f"?{urlencode({'query': query, 'limit': 1})}"
        )
        data = self.request(endpoint)
        return data.get("data") if isinstance(data, dict) else None

    def clear_cache(self) -> None:
        self.cache.clear()


def _data_list(payload: Any) -> list[dict]:
    """The ``data`` list of a listing response, or [] if there isn't one."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    return []
