"""Challenge state models, one per game type.

A challenge is the in-progress state of one game for one verse. The
``Challenge`` union is discriminated by ``game_type`` so exactly one
variant is active and a rebuild always replaces the whole state.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from models import BlankStatus, GameResult, GameType


class BaseChallenge(BaseModel):
    """Fields shared by every challenge."""

    text: str  # verse text the challenge was built from
    result: GameResult | None = None  # set by the last check_answer
    show_answer: bool = False


class BlankToken(BaseModel):
    word: str
    is_blank: bool = False


class FillBlankChallenge(BaseChallenge):
    """Verse with some words hidden; the user types each hidden word."""

    game_type: Literal[GameType.FILL_BLANK] = GameType.FILL_BLANK
    tokens: list[BlankToken]
    inputs: dict[int, str] = Field(default_factory=dict)  # position -> typed text
    statuses: dict[int, BlankStatus] = Field(default_factory=dict)

    @property
    def blank_positions(self) -> list[int]:
        return [i for i, token in enumerate(self.tokens) if token.is_blank]


class WordOrderChallenge(BaseChallenge):
    """Shuffled words the user places back in order."""

    game_type: Literal[GameType.WORD_ORDER] = GameType.WORD_ORDER
    words: list[str]  # original order
    bank: list[str]  # unplaced words, shuffled
    selection: list[str] = Field(default_factory=list)


class TypingChallenge(BaseChallenge):
    """Free-text recall with an optional growing hint."""

    game_type: Literal[GameType.TYPING] = GameType.TYPING
    words: list[str]
    user_input: str = ""
    revealed_count: int = 0
    show_hints: bool = True

    @property
    def revealed_words(self) -> list[str]:
        if not self.show_hints:
            return []
        return self.words[: self.revealed_count]

    @property
    def can_reveal_more(self) -> bool:
        return self.show_hints and self.revealed_count < len(self.words)


Challenge = Annotated[
    Union[FillBlankChallenge, WordOrderChallenge, TypingChallenge],
    Field(discriminator="game_type"),
]
