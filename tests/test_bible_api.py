"""Tests for the API.Bible client and its response cache."""

import pytest
import requests

from errors import BibleApiError
from sources import BIBLE_API_BASE, CACHE_DURATION, BibleApiClient, ResponseCache, VerseResolver
from sources.bible_api import CACHE_KEY
from conftest import FakeHttp, FakeResponse

BIBLE_ID = "de4e12af7f28f599-02"

VERSE_PAYLOAD = {
    "data": {
        "id": "JHN.3.16",
        "reference": "John 3:16",
        "content": "  For God so loved the world...  ",
    }
}

BIBLES_PAYLOAD = {
    "data": [
        {"id": BIBLE_ID, "name": "King James (Authorised) Version", "abbreviation": "engKJV"},
    ]
}


class Clock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRequest:
    """Tests for raw endpoint requests."""

    def test_sends_key_header(self):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        client = BibleApiClient("my-key", http=http)

        client.request("/bibles?language=eng")

        call = http.calls[0]
        assert call["url"] == f"{BIBLE_API_BASE}/bibles?language=eng"
        assert call["headers"] == {"api-key": "my-key"}

    def test_repeat_served_from_cache(self):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        client = BibleApiClient("my-key", http=http)

        first = client.request("/bibles?language=eng")
        second = client.request("/bibles?language=eng")

        assert first == second
        assert len(http.calls) == 1

    def test_http_error_carries_status(self):
        http = FakeHttp({"/bibles": FakeResponse(status_code=401)})
        client = BibleApiClient("bad-key", http=http)

        with pytest.raises(BibleApiError) as excinfo:
            client.request("/bibles")

        assert excinfo.value.status_code == 401

    def test_errors_not_cached(self):
        responses = {"/bibles": FakeResponse(status_code=500)}
        http = FakeHttp(responses)
        client = BibleApiClient("my-key", http=http)

        with pytest.raises(BibleApiError):
            client.request("/bibles")
        responses["/bibles"] = FakeResponse(json_data=BIBLES_PAYLOAD)

        assert client.request("/bibles") == BIBLES_PAYLOAD

    def test_network_error(self):
        http = FakeHttp({"/bibles": requests.Timeout("slow")})
        client = BibleApiClient("my-key", http=http)
        with pytest.raises(BibleApiError):
            client.request("/bibles")

    def test_malformed_body(self):
        http = FakeHttp({"/bibles": FakeResponse(text="<html>")})
        client = BibleApiClient("my-key", http=http)
        with pytest.raises(BibleApiError):
            client.request("/bibles")

    def test_environment_key_used_when_empty(self, monkeypatch):
        monkeypatch.setenv("BIBLE_API_KEY", "env-key")
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        client = BibleApiClient("", http=http)

        client.request("/bibles")

        assert http.calls[0]["headers"] == {"api-key": "env-key"}

    def test_user_key_beats_environment(self, monkeypatch):
        monkeypatch.setenv("BIBLE_API_KEY", "env-key")
        assert BibleApiClient("mine").effective_key == "mine"


class TestEndpoints:
    """Tests for the typed endpoint helpers."""

    def test_get_bibles(self):
        http = FakeHttp({"/bibles?language=spa": FakeResponse(json_data=BIBLES_PAYLOAD)})
        client = BibleApiClient("k", http=http)
        assert client.get_bibles("spa") == BIBLES_PAYLOAD["data"]

    def test_get_languages(self):
        payload = {"data": [{"id": "eng", "name": "English"}]}
        http = FakeHttp({"/bibles/languages": FakeResponse(json_data=payload)})
        client = BibleApiClient("k", http=http)
        assert client.get_languages() == payload["data"]

    def test_listing_without_data_is_empty(self):
        http = FakeHttp({"/bibles": FakeResponse(json_data={"unexpected": True})})
        client = BibleApiClient("k", http=http)
        assert client.get_bibles() == []

    def test_get_verse_requests_plain_text(self):
        http = FakeHttp({"/verses/JHN.3.16": FakeResponse(json_data=VERSE_PAYLOAD)})
        client = BibleApiClient("k", http=http)

        verse = client.get_verse(BIBLE_ID, "JHN.3.16")

        assert verse["content"].strip() == "For God so loved the world..."
        url = http.calls[0]["url"]
        assert url.startswith(f"{BIBLE_API_BASE}/bibles/{BIBLE_ID}/verses/JHN.3.16?")
        assert "content-type=text" in url
        assert "include-verse-numbers=false" in url

    def test_get_verse_without_data(self):
        http = FakeHttp({"/verses/": FakeResponse(json_data={"data": None})})
        client = BibleApiClient("k", http=http)
        with pytest.raises(BibleApiError):
            client.get_verse(BIBLE_ID, "JHN.3.16")

    def test_search_verse(self):
        payload = {"data": {"query": "John 3:16", "passages": []}}
        http = FakeHttp({"/search?": FakeResponse(json_data=payload)})
        client = BibleApiClient("k", http=http)

        assert client.search_verse(BIBLE_ID, "John 3:16") == payload["data"]
        assert "limit=1" in http.calls[0]["url"]


class TestPersistentCache:
    """Tests for the cache kept in the key/value store."""

    def test_cache_shared_through_store(self, kv_store):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        clock = Clock()
        BibleApiClient("k", store=kv_store, http=http, clock=clock).get_bibles()

        other = BibleApiClient("k", store=kv_store, http=http, clock=clock)
        other.get_bibles()

        assert len(http.calls) == 1

    def test_cache_expires(self, kv_store):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        clock = Clock()
        BibleApiClient("k", store=kv_store, http=http, clock=clock).get_bibles()

        clock.now += CACHE_DURATION
        BibleApiClient("k", store=kv_store, http=http, clock=clock).get_bibles()

        assert len(http.calls) == 2

    def test_cache_valid_just_before_expiry(self, kv_store):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        clock = Clock()
        BibleApiClient("k", store=kv_store, http=http, clock=clock).get_bibles()

        clock.now += CACHE_DURATION - 1
        BibleApiClient("k", store=kv_store, http=http, clock=clock).get_bibles()

        assert len(http.calls) == 1

    def test_clear_cache(self, kv_store):
        http = FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})
        client = BibleApiClient("k", store=kv_store, http=http)
        client.get_bibles()

        client.clear_cache()

        assert kv_store.get(CACHE_KEY) is None
        client.get_bibles()
        assert len(http.calls) == 2

    def test_garbage_in_store_ignored(self, kv_store):
        kv_store.set(CACHE_KEY, ["not", "a", "cache"])
        client = BibleApiClient("k", store=kv_store)
        assert client.cache.entries == {}


class TestSharedCache:
    """Tests for one response cache used by clients with different keys."""

    ENDPOINTS = ["/bibles?language=eng", "/bibles?language=spa", "/bibles/languages"]

    def make_http(self) -> FakeHttp:
        return FakeHttp({"/bibles": FakeResponse(json_data=BIBLES_PAYLOAD)})

    def test_switching_keys_keeps_every_entry(self, kv_store):
        http = self.make_http()
        cache = ResponseCache(kv_store)
        first = BibleApiClient("key1", http=http, cache=cache)
        second = BibleApiClient("key2", http=http, cache=cache)

        first.request(self.ENDPOINTS[0])
        second.request(self.ENDPOINTS[1])
        first.request(self.ENDPOINTS[2])

        assert set(kv_store.get(CACHE_KEY)["cache"]) == set(self.ENDPOINTS)

    def test_separate_caches_merge_on_write(self, kv_store):
        """Writes keep entries another cache on the same store saved."""
        http = self.make_http()
        first = BibleApiClient("key1", store=kv_store, http=http)
        second = BibleApiClient("key2", store=kv_store, http=http)

        first.request(self.ENDPOINTS[0])
        second.request(self.ENDPOINTS[1])
        first.request(self.ENDPOINTS[2])

        assert set(kv_store.get(CACHE_KEY)["cache"]) == set(self.ENDPOINTS)
        first.request(self.ENDPOINTS[1])
        assert len(http.calls) == 3

    def test_clear_from_one_client_clears_all(self, kv_store):
        http = self.make_http()
        cache = ResponseCache(kv_store)
        first = BibleApiClient("key1", http=http, cache=cache)
        second = BibleApiClient("key2", http=http, cache=cache)
        first.request(self.ENDPOINTS[0])

        second.clear_cache()
        first.request(self.ENDPOINTS[0])

        assert len(http.calls) == 2

    def test_resolver_clients_share_cache(self, kv_store):
        resolver = VerseResolver(cache=ResponseCache(kv_store))
        first = resolver.client_for("key1")
        assert resolver.client_for("key2").cache is first.cache is resolver.cache

    def test_resolver_clear_cache(self, kv_store):
        http = self.make_http()
        resolver = VerseResolver(
            lambda api_key: BibleApiClient(api_key, store=kv_store, http=http)
        )
        resolver.client_for("key1").request(self.ENDPOINTS[0])
        resolver.client_for("key2").request(self.ENDPOINTS[1])

        resolver.clear_cache()

        assert kv_store.get(CACHE_KEY) is None
        resolver.client_for("key1").request(self.ENDPOINTS[1])
        assert len(http.calls) == 3
