"""Word order game.

Shows the verse's words shuffled in a bank. The user moves words into a
selection one at a time, can send them back, and can drag them around
within the selection until the verse reads correctly.
"""

import random

from errors import InvalidMoveError
from games.base import GameHandler
from games.challenges import WordOrderChallenge
from games.config import GameConfig
from games.text import normalize, tokenize


class WordOrderHandler(GameHandler[WordOrderChallenge]):
    """Handler for word order challenges."""

    @classmethod
    def build(
        cls,
        text: str,
        config: GameConfig,
        rng: random.Random,
        show_hints: bool = True,
    ) -> WordOrderChallenge:
        words = tokenize(text)
        bank = list(words)
        if config.word_order.shuffle_words:
            rng.shuffle(bank)

        return WordOrderChallenge(text=text, words=words, bank=bank)

    def pick_from_bank(self, bank_index: int) -> str:
        """Move the word at ``bank_index`` to the end of the selection.

        Words are addressed by index since a verse may repeat a word.
        """
        bank = self.challenge.bank
        if not 0 <= bank_index < len(bank):
            raise InvalidMoveError(f"No word at bank position {bank_index}")

        word = bank.pop(bank_index)
        self.challenge.selection.append(word)
        return word

    def remove_from_selection(self, selection_index: int) -> str:
        """Send the word at ``selection_index`` back to the end of the bank."""
        selection = self.challenge.selection
        if not 0 <= selection_index < len(selection):
            raise InvalidMoveError(
                f"No word at selection position {selection_index}"
            )

        word = selection.pop(selection_index)
        self.challenge.bank.append(word)
        return word

    def move_within_selection(self, from_index: int, to_index: int) -> None:
        """Move one placed word to a new position, shifting the others.

        A drag gesture is a series of these calls, each one leaving the
        selection fully reordered.
        """
        selection = self.challenge.selection
        size = len(selection)
        if not 0 <= from_index < size:
            raise InvalidMoveError(f"No word at selection position {from_index}")
        if not 0 <= to_index < size:
            raise InvalidMoveError(f"Cannot move a word to position {to_index}")

        if from_index == to_index:
            return

        word = selection.pop(from_index)
        selection.insert(to_index, word)

    # Drag-and-drop name for the same operation
    reorder_selection = move_within_selection

    def grade(self) -> bool:
        correct_order = normalize(" ".join(self.challenge.words))
        user_order = normalize(" ".join(self.challenge.selection))
        return correct_order == user_order
