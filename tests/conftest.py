"""Shared pytest fixtures for the verse trainer test suite."""

import random
import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from games import GameConfig, GameEngine
from models import ResolvedVerse, Settings, Verse
from storage import SQLiteKeyValueStore, init_schema


JOHN_3_16 = (
    "For God so loved the world, that he gave his only begotten Son, "
    "that whosoever believeth in him should not perish, but have everlasting life."
)


class FakeResponse:
    """Stand-in for requests.Response with just what the code reads."""

    def __init__(self, status_code: int = 200, json_data=None, text: str = ""):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_data is None:
            raise ValueError("Expecting value")
        return self._json_data


class FakeHttp:
    """Records GET calls and answers them from a URL -> response mapping.

    Values may be a FakeResponse or an exception instance to raise.
    The first mapping key that is a substring of the URL wins.
    """

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls: list[dict] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        for fragment, response in self.responses.items():
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(status_code=404)


@pytest.fixture
def john_3_16() -> Verse:
    return Verse(id="verse-1", text=JOHN_3_16, reference="John 3:16", version="KJV")


@pytest.fixture
def sample_verses() -> list[Verse]:
    """Three short verses for navigation tests."""
    return [
        Verse(
            id="verse-1",
            text="Jesus wept.",
            reference="John 11:35",
            version="KJV",
        ),
        Verse(
            id="verse-2",
            text="Rejoice evermore. Pray without ceasing.",
            reference="1 Thessalonians 5:16-17",
            version="KJV",
        ),
        Verse(
            id="verse-3",
            text="The Lord is my shepherd; I shall not want.",
            reference="Psalm 23:1",
            version="KJV",
        ),
    ]


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


@pytest.fixture
def api_settings() -> Settings:
    """Settings asking for API.Bible text."""
    return Settings(
        use_api_version=True,
        bible_api_key="test-key",
        selected_bible_id="de4e12af7f28f599-02",
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def engine(rng) -> GameEngine:
    return GameEngine(rng=rng)


class StaticResolver:
    """Resolver returning the local text, recording what it was asked."""

    def __init__(self):
        self.calls: list[str] = []

    def resolve(self, verse: Verse, settings: Settings) -> ResolvedVerse:
        self.calls.append(verse.id)
        return ResolvedVerse(
            text=verse.text.strip(), reference=verse.reference, version=verse.version
        )


@pytest.fixture
def static_resolver() -> StaticResolver:
    return StaticResolver()


@pytest.fixture
def test_db_path(tmp_path) -> Path:
    """Create a temporary database path for testing."""
    db_path = tmp_path / "test_trainer.db"
    init_schema(db_path)
    return db_path


@pytest.fixture
def kv_store(test_db_path) -> SQLiteKeyValueStore:
    return SQLiteKeyValueStore(test_db_path)
