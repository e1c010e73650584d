"""Practice games for the verse trainer.

Architecture:
- Challenge models hold the in-progress state of one game for one verse
- Handlers build challenges, capture responses and grade them
- The engine keeps exactly one handler active and replaces it on rebuild

Games:
- FillBlankHandler: type the hidden words back into the verse
- WordOrderHandler: place shuffled words back in order
- TypingHandler: type the whole verse from memory
"""

from games.base import GameHandler
from games.challenges import (
    BlankToken,
    Challenge,
    FillBlankChallenge,
    TypingChallenge,
    WordOrderChallenge,
)
from games.config import FillBlankConfig, GameConfig, TypingConfig, WordOrderConfig
from games.engine import GAME_HANDLERS, GameEngine, get_game_handler
from games.fill_blank import FillBlankHandler, blank_count_for, pick_blank_positions
from games.text import PUNCTUATION, normalize, tokenize
from games.typing_game import TypingHandler
from games.word_order import WordOrderHandler

__all__ = [
    # Text utilities
    "PUNCTUATION",
    "normalize",
    "tokenize",
    # Challenge models
    "BlankToken",
    "Challenge",
    "FillBlankChallenge",
    "WordOrderChallenge",
    "TypingChallenge",
    # Configuration
    "GameConfig",
    "FillBlankConfig",
    "WordOrderConfig",
    "TypingConfig",
    # Handlers
    "GameHandler",
    "FillBlankHandler",
    "WordOrderHandler",
    "TypingHandler",
    "blank_count_for",
    "pick_blank_positions",
    # Engine
    "GAME_HANDLERS",
    "GameEngine",
    "get_game_handler",
]
