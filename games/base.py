"""Abstract base class for game handlers."""

import random
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from games.challenges import BaseChallenge
from games.config import GameConfig
from models import GameResult

C = TypeVar("C", bound=BaseChallenge)


class GameHandler(ABC, Generic[C]):
    """Abstract base class for game handlers.

    Each game type implements this interface to provide:
    - Challenge construction from verse text (classmethod)
    - Response capture (game specific methods)
    - Answer checking

    To add a game type:
    1. Add a challenge model to games/challenges.py and the Challenge union
    2. Create a handler class extending GameHandler[YourChallenge]
    3. Register it in GAME_HANDLERS in games/engine.py
    """

    def __init__(self, challenge: C):
        """Initialize handler with a freshly built challenge."""
        self.challenge = challenge

    @classmethod
    @abstractmethod
    def build(
        cls,
        text: str,
        config: GameConfig,
        rng: random.Random,
        show_hints: bool = True,
    ) -> C:
        """Build a new challenge for the given verse text.

        Args:
            text: Verse display text, already trimmed.
            config: Construction settings for all game types.
            rng: Random source for blank selection and shuffling.
            show_hints: Whether the user asked for hints.

        Returns:
            A challenge in its initial state.
        """
        ...

    @abstractmethod
    def grade(self) -> bool:
        """Compare the captured response with the verse.

        May update per-position feedback on the challenge but nothing else.
        """
        ...

    def check_answer(self) -> GameResult:
        """Grade the current response and remember the result.

        Safe to call any number of times.
        """
        result = GameResult(is_correct=self.grade(), completed=True)
        self.challenge.result = result
        return result

    def toggle_answer(self) -> bool:
        """Show or hide the full verse text. Returns the new state."""
        self.challenge.show_answer = not self.challenge.show_answer
        return self.challenge.show_answer
