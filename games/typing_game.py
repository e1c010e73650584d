"""Type-it-out game.

The user types the whole verse from memory. With hints on, the first word
is shown and more words can be revealed a few at a time.
"""

import random

from games.base import GameHandler
from games.challenges import TypingChallenge
from games.config import GameConfig
from games.text import normalize, tokenize


class TypingHandler(GameHandler[TypingChallenge]):
    """Handler for type-it-out challenges."""

    def __init__(self, challenge: TypingChallenge, reveal_step: int = 3):
        super().__init__(challenge)
        self.reveal_step = reveal_step

    @classmethod
    def build(
        cls,
        text: str,
        config: GameConfig,
        rng: random.Random,
        show_hints: bool = True,
    ) -> TypingChallenge:
        words = tokenize(text)
        return TypingChallenge(
            text=text,
            words=words,
            revealed_count=min(1, len(words)) if show_hints else 0,
            show_hints=show_hints,
        )

    def set_input(self, text: str) -> None:
        self.challenge.user_input = text

    def reveal_more(self) -> int:
        """Reveal the next few words of the hint. Returns the new count."""
        challenge = self.challenge
        if challenge.can_reveal_more:
            challenge.revealed_count = min(
                challenge.revealed_count + self.reveal_step, len(challenge.words)
            )
        return challenge.revealed_count

    def grade(self) -> bool:
        return normalize(self.challenge.user_input) == normalize(self.challenge.text)
