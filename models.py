from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GameType(str, Enum):
    FILL_BLANK = "fillBlank"
    WORD_ORDER = "wordOrder"
    TYPING = "typing"


class BlankStatus(str, Enum):
    EMPTY = "empty"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class SessionStatus(str, Enum):
    """What the practice view can show right now."""

    NO_CONTENT = "no_content"
    LOADING = "loading"
    READY = "ready"


class Verse(BaseModel):
    """A verse as loaded from a verse source. Never mutated after loading."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    reference: str  # e.g. "1 Corinthians 13:4-7"
    version: str  # label of the translation the text came from


class ResolvedVerse(BaseModel):
    """The text actually shown for a verse, local or fetched."""

    text: str
    reference: str
    version: str


class GameResult(BaseModel):
    is_correct: bool = False
    completed: bool = False


class Settings(BaseModel):
    """User settings, stored as a camelCase JSON blob."""

    model_config = ConfigDict(populate_by_name=True)

    csv_url: str = Field(default="", alias="csvUrl")
    use_api_version: bool = Field(default=False, alias="useApiVersion")
    bible_api_key: str = Field(default="", alias="bibleApiKey")
    selected_bible_id: str = Field(default="", alias="selectedBibleId")
    selected_language: str = Field(default="eng", alias="selectedLanguage")
    show_hints: bool = Field(default=True, alias="showHints")

    @property
    def wants_api_text(self) -> bool:
        """True when the remote version should replace the local text."""
        return bool(
            self.use_api_version and self.bible_api_key and self.selected_bible_id
        )

    def to_store(self) -> dict:
        return self.model_dump(by_alias=True)
