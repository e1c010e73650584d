"""Fill-in-the-blank game.

Hides a quarter of the verse's words (never the first or last) and asks the
user to type each hidden word back in place.
"""

import math
import random

from errors import InvalidMoveError
from games.base import GameHandler
from games.challenges import BlankToken, FillBlankChallenge
from games.config import FillBlankConfig, GameConfig
from games.text import normalize, tokenize
from models import BlankStatus


def blank_count_for(word_count: int, config: FillBlankConfig) -> int:
    """Number of blanks wanted for a verse of ``word_count`` words.

    Clamped to the positions that may be blanked, so short verses get
    fewer blanks instead of an impossible request.
    """
    wanted = max(config.min_blanks, math.floor(word_count * config.blank_ratio))
    available = max(0, word_count - 2)
    return min(wanted, available)


def pick_blank_positions(
    word_count: int,
    config: FillBlankConfig,
    rng: random.Random,
) -> set[int]:
    """Pick distinct positions in [1, word_count - 2] uniformly at random."""
    count = blank_count_for(word_count, config)
    positions: set[int] = set()

    # Retry on duplicates until enough distinct positions are drawn
    while len(positions) < count:
        positions.add(rng.randint(1, word_count - 2))

    return positions


class FillBlankHandler(GameHandler[FillBlankChallenge]):
    """Handler for fill-in-the-blank challenges."""

    @classmethod
    def build(
        cls,
        text: str,
        config: GameConfig,
        rng: random.Random,
        show_hints: bool = True,
    ) -> FillBlankChallenge:
        words = tokenize(text)
        positions = pick_blank_positions(len(words), config.fill_blank, rng)

        tokens = [
            BlankToken(word=word, is_blank=i in positions)
            for i, word in enumerate(words)
        ]

        return FillBlankChallenge(
            text=text,
            tokens=tokens,
            inputs={i: "" for i in sorted(positions)},
        )

    def set_blank_input(self, position: int, text: str) -> None:
        """Overwrite what the user typed into one blank."""
        if position not in self.challenge.inputs:
            raise InvalidMoveError(f"Position {position} is not a blank")
        self.challenge.inputs[position] = text

    def blank_status(self, position: int) -> BlankStatus | None:
        """Status from the last check, or None if not graded yet."""
        return self.challenge.statuses.get(position)

    def grade(self) -> bool:
        statuses: dict[int, BlankStatus] = {}

        for position in self.challenge.blank_positions:
            user_word = normalize(self.challenge.inputs.get(position, ""))
            correct_word = normalize(self.challenge.tokens[position].word)

            if not user_word:
                statuses[position] = BlankStatus.EMPTY
            elif user_word == correct_word:
                statuses[position] = BlankStatus.CORRECT
            else:
                statuses[position] = BlankStatus.INCORRECT

        self.challenge.statuses = statuses
        return all(status == BlankStatus.CORRECT for status in statuses.values())
