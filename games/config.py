"""Configuration for challenge construction.

These models let callers tune how challenges are built, such as how many
words are blanked or how fast the typing hint grows.
"""

from pydantic import BaseModel, Field


class FillBlankConfig(BaseModel):
    """Configuration for fill-in-the-blank construction."""

    blank_ratio: float = Field(default=0.25, gt=0.0, le=1.0)
    min_blanks: int = Field(default=2, ge=1)


class WordOrderConfig(BaseModel):
    """Configuration for word-order construction."""

    shuffle_words: bool = True


class TypingConfig(BaseModel):
    """Configuration for the type-it-out game."""

    reveal_step: int = Field(default=3, ge=1)


class GameConfig(BaseModel):
    """Master configuration for all game types."""

    fill_blank: FillBlankConfig = Field(default_factory=FillBlankConfig)
    word_order: WordOrderConfig = Field(default_factory=WordOrderConfig)
    typing: TypingConfig = Field(default_factory=TypingConfig)
