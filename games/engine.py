"""Game engine: builds one challenge at a time and routes user actions to it."""

import random

from errors import InvalidMoveError
from games.base import GameHandler
from games.config import GameConfig
from games.fill_blank import FillBlankHandler
from games.typing_game import TypingHandler
from games.word_order import WordOrderHandler
from models import GameResult, GameType

# Registry of game handler classes
GAME_HANDLERS: dict[GameType, type[GameHandler]] = {
    GameType.FILL_BLANK: FillBlankHandler,
    GameType.WORD_ORDER: WordOrderHandler,
    GameType.TYPING: TypingHandler,
}


def get_game_handler(game_type: GameType) -> type[GameHandler]:
    """Get the handler class for the given game type."""
    return GAME_HANDLERS[game_type]


class GameEngine:
    """Holds the active challenge and swaps it out whole on every rebuild.

    Args:
        config: Construction settings. Defaults to ``GameConfig()``.
        rng: Random source for blanks and shuffles. Pass a seeded
            ``random.Random`` for reproducible challenges.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.handler: GameHandler | None = None

    @property
    def challenge(self):
        return self.handler.challenge if self.handler else None

    @property
    def game_type(self) -> GameType | None:
        return self.challenge.game_type if self.handler else None

    def build(
        self, text: str, game_type: GameType, show_hints: bool = True
    ) -> GameHandler:
        """Replace the active challenge with a new one for ``text``."""
        handler_class = get_game_handler(game_type)
        challenge = handler_class.build(text, self.config, self.rng, show_hints)

        if handler_class is TypingHandler:
            handler = TypingHandler(challenge, self.config.typing.reveal_step)
        else:
            handler = handler_class(challenge)

        self.handler = handler
        return handler

    def clear(self) -> None:
        self.handler = None

    def _require(self, handler_class: type[GameHandler]) -> GameHandler:
        if self.handler is None:
            raise InvalidMoveError("No active challenge")
        if not isinstance(self.handler, handler_class):
            raise InvalidMoveError(
                f"That command does not apply to the {self.game_type.value} game"
            )
        return self.handler

    # Fill in the blank

    def set_blank_input(self, position: int, text: str) -> None:
        self._require(FillBlankHandler).set_blank_input(position, text)

    # Word order

    def pick_from_bank(self, bank_index: int) -> str:
        return self._require(WordOrderHandler).pick_from_bank(bank_index)

    def remove_from_selection(self, selection_index: int) -> str:
        return self._require(WordOrderHandler).remove_from_selection(
            selection_index
        )

    def move_within_selection(self, from_index: int, to_index: int) -> None:
        self._require(WordOrderHandler).move_within_selection(from_index, to_index)

    # Typing

    def set_input(self, text: str) -> None:
        self._require(TypingHandler).set_input(text)

    def reveal_more(self) -> int:
        return self._require(TypingHandler).reveal_more()

    # Any game

    def check_answer(self) -> GameResult:
        if self.handler is None:
            raise InvalidMoveError("No active challenge")
        return self.handler.check_answer()

    def toggle_answer(self) -> bool:
        if self.handler is None:
            raise InvalidMoveError("No active challenge")
        return self.handler.toggle_answer()
