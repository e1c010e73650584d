"""Tests for the game engine and handler registry."""

import random

import pytest

from errors import InvalidMoveError
from games import (
    GAME_HANDLERS,
    FillBlankChallenge,
    FillBlankHandler,
    GameConfig,
    GameEngine,
    TypingChallenge,
    TypingConfig,
    TypingHandler,
    WordOrderChallenge,
    WordOrderHandler,
    get_game_handler,
)
from models import GameType
from conftest import JOHN_3_16


class TestRegistry:
    def test_every_game_type_has_a_handler(self):
        assert set(GAME_HANDLERS) == set(GameType)

    @pytest.mark.parametrize(
        "game_type, handler_class",
        [
            (GameType.FILL_BLANK, FillBlankHandler),
            (GameType.WORD_ORDER, WordOrderHandler),
            (GameType.TYPING, TypingHandler),
        ],
    )
    def test_lookup(self, game_type, handler_class):
        assert get_game_handler(game_type) is handler_class


class TestBuild:
    """Tests for building and replacing challenges."""

    def test_starts_empty(self):
        engine = GameEngine()
        assert engine.handler is None
        assert engine.challenge is None
        assert engine.game_type is None

    @pytest.mark.parametrize(
        "game_type, challenge_class",
        [
            (GameType.FILL_BLANK, FillBlankChallenge),
            (GameType.WORD_ORDER, WordOrderChallenge),
            (GameType.TYPING, TypingChallenge),
        ],
    )
    def test_builds_matching_challenge(self, engine, game_type, challenge_class):
        engine.build(JOHN_3_16, game_type)
        assert isinstance(engine.challenge, challenge_class)
        assert engine.game_type == game_type
        assert engine.challenge.text == JOHN_3_16

    def test_rebuild_discards_previous_state(self, engine):
        engine.build(JOHN_3_16, GameType.TYPING)
        engine.set_input("For God")
        engine.check_answer()

        engine.build(JOHN_3_16, GameType.TYPING)

        assert engine.challenge.user_input == ""
        assert engine.challenge.result is None

    def test_switching_games_replaces_variant(self, engine):
        engine.build(JOHN_3_16, GameType.FILL_BLANK)
        engine.build(JOHN_3_16, GameType.WORD_ORDER)
        assert isinstance(engine.challenge, WordOrderChallenge)
        with pytest.raises(InvalidMoveError):
            engine.set_blank_input(1, "God")

    def test_typing_uses_configured_step(self):
        config = GameConfig(typing=TypingConfig(reveal_step=2))
        engine = GameEngine(config=config, rng=random.Random(0))
        engine.build(JOHN_3_16, GameType.TYPING)
        assert engine.reveal_more() == 3

    def test_seeded_engines_agree(self):
        first = GameEngine(rng=random.Random(42))
        second = GameEngine(rng=random.Random(42))
        first.build(JOHN_3_16, GameType.WORD_ORDER)
        second.build(JOHN_3_16, GameType.WORD_ORDER)
        assert first.challenge.bank == second.challenge.bank

    def test_show_hints_passed_to_typing(self, engine):
        engine.build(JOHN_3_16, GameType.TYPING, show_hints=False)
        assert engine.challenge.revealed_count == 0

    def test_clear(self, engine):
        engine.build(JOHN_3_16, GameType.TYPING)
        engine.clear()
        assert engine.challenge is None


class TestDispatch:
    """Tests for routing actions to the active game."""

    def test_wrong_game_rejected(self, engine):
        engine.build(JOHN_3_16, GameType.TYPING)
        with pytest.raises(InvalidMoveError):
            engine.pick_from_bank(0)
        with pytest.raises(InvalidMoveError):
            engine.move_within_selection(0, 1)

    def test_no_challenge_rejected(self):
        engine = GameEngine()
        with pytest.raises(InvalidMoveError):
            engine.check_answer()
        with pytest.raises(InvalidMoveError):
            engine.toggle_answer()
        with pytest.raises(InvalidMoveError):
            engine.set_input("text")

    def test_fill_blank_round_trip(self, engine):
        engine.build(JOHN_3_16, GameType.FILL_BLANK)
        challenge = engine.challenge
        for position in challenge.blank_positions:
            engine.set_blank_input(position, challenge.tokens[position].word)
        assert engine.check_answer().is_correct

    def test_word_order_round_trip(self, engine):
        engine.build("Jesus wept.", GameType.WORD_ORDER)
        challenge = engine.challenge
        for word in challenge.words:
            engine.pick_from_bank(challenge.bank.index(word))
        assert engine.check_answer().is_correct

    def test_remove_from_selection(self, engine):
        engine.build("Jesus wept.", GameType.WORD_ORDER)
        word = engine.pick_from_bank(0)
        assert engine.remove_from_selection(0) == word
        assert engine.challenge.selection == []

    def test_toggle_answer(self, engine):
        engine.build(JOHN_3_16, GameType.FILL_BLANK)
        assert engine.toggle_answer() is True
        assert engine.toggle_answer() is False
