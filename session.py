"""Practice session: the verse being practiced, the game being played and
the challenge built from them.

Loading a verse is two-phase. ``begin_load`` hands out a ticket and puts the
session in the LOADING state; ``complete_load`` installs the resolved text
only if that ticket is still the newest. A navigation made while a verse is
loading therefore supersedes it, and the late result is dropped. While
loading, every response-capture call is ignored so input meant for one verse
never lands on the next.
"""

import logging

from games import GameEngine
from models import (
    GameResult,
    GameType,
    ResolvedVerse,
    SessionStatus,
    Settings,
    Verse,
)
from sources import VerseResolver

logger = logging.getLogger(__name__)

# Settings that change which text is displayed for a verse
TEXT_SOURCE_FIELDS = ("use_api_version", "bible_api_key", "selected_bible_id")


class PracticeSession:
    """Navigation, loading state and game dispatch for the practice view.

    Args:
        verses: Verses from the verse source. May be empty.
        settings: Current user settings.
        resolver: Turns a verse into display text. Defaults to a
            ``VerseResolver`` talking to API.Bible.
        engine: Game engine. Pass one with a seeded ``random.Random`` for
            reproducible challenges.
        game_type: Game to start with.
        auto_resolve: Resolve verse text as soon as a load starts. With
            False the caller drives resolution via ``resolve_pending`` or
            ``complete_load``.
    """

    def __init__(
        self,
        verses: list[Verse],
        settings: Settings | None = None,
        resolver: VerseResolver | None = None,
        engine: GameEngine | None = None,
        game_type: GameType = GameType.FILL_BLANK,
        auto_resolve: bool = True,
    ):
        self.verses = list(verses)
        self.settings = settings or Settings()
        self.resolver = resolver or VerseResolver()
        self.engine = engine or GameEngine()
        self.game_type = game_type
        self.auto_resolve = auto_resolve

        self.current_index = 0
        self.display_verse: ResolvedVerse | None = None
        self._ticket = 0
        self._pending: int | None = None

        self.load_current()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        if not self.verses:
            return SessionStatus.NO_CONTENT
        if self._pending is not None or self.engine.handler is None:
            return SessionStatus.LOADING
        return SessionStatus.READY

    @property
    def is_ready(self) -> bool:
        return self.status == SessionStatus.READY

    @property
    def current_verse(self) -> Verse | None:
        if not self.verses:
            return None
        return self.verses[self.current_index]

    @property
    def challenge(self):
        """The active challenge, or None while loading or with no verses."""
        return self.engine.challenge if self.is_ready else None

    @property
    def pending_ticket(self) -> int | None:
        """Ticket of the load in progress, or None."""
        return self._pending

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index >= len(self.verses) - 1

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def begin_load(self) -> int:
        """Start loading the current verse and return its ticket.

        Drops the active challenge; a newer ticket supersedes older ones.
        """
        self._ticket += 1
        self._pending = self._ticket
        self.display_verse = None
        self.engine.clear()
        return self._ticket

    def complete_load(self, ticket: int, resolved: ResolvedVerse) -> bool:
        """Install resolved text for ``ticket`` and build a fresh challenge.

        Returns:
            False if the ticket was superseded and the result discarded.
        """
        if ticket != self._pending:
            logger.debug(
                "Discarding stale verse text for %s (ticket %d, current %s)",
                resolved.reference,
                ticket,
                self._pending,
            )
            return False

        self._pending = None
        self.display_verse = resolved
        self._build(resolved)
        return True

    def resolve_pending(self) -> bool:
        """Resolve the verse for the outstanding ticket, if any."""
        if self._pending is None or self.current_verse is None:
            return False
        ticket = self._pending
        resolved = self.resolver.resolve(self.current_verse, self.settings)
        return self.complete_load(ticket, resolved)

    def load_current(self) -> None:
        """(Re)load the verse at the current index."""
        if not self.verses:
            self._pending = None
            self.display_verse = None
            self.engine.clear()
            return

        self.begin_load()
        if self.auto_resolve:
            self.resolve_pending()

    def _build(self, verse: ResolvedVerse) -> None:
        self.engine.build(verse.text, self.game_type, self.settings.show_hints)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select(self, index: int) -> bool:
        """Jump to a verse, clamped to the list. Returns True if it moved."""
        if not self.verses:
            return False
        index = max(0, min(index, len(self.verses) - 1))
        if index == self.current_index:
            return False
        self.current_index = index
        self.load_current()
        return True

    def next(self) -> bool:
        """Move to the next verse. No-op at the last verse."""
        if self.is_last:
            return False
        return self.select(self.current_index + 1)

    def previous(self) -> bool:
        """Move to the previous verse. No-op at the first verse."""
        if self.is_first:
            return False
        return self.select(self.current_index - 1)

    def set_game_type(self, game_type: GameType) -> None:
        """Switch games. Always builds a fresh challenge."""
        self.game_type = game_type
        if self._pending is None and self.display_verse is not None:
            self._build(self.display_verse)

    def reset(self) -> None:
        """Rebuild the current challenge with new blanks or a new shuffle."""
        if self._pending is None and self.display_verse is not None:
            self._build(self.display_verse)

    def set_verses(self, verses: list[Verse]) -> None:
        """Replace the verse list and start again from the first verse."""
        self.verses = list(verses)
        self.current_index = 0
        self.load_current()

    def update_settings(self, settings: Settings) -> None:
        """Apply new settings.

        Changing the text source reloads the current verse; toggling hints
        rebuilds the current challenge.
        """
        previous = self.settings
        self.settings = settings

        if any(
            getattr(previous, field) != getattr(settings, field)
            for field in TEXT_SOURCE_FIELDS
        ):
            self.load_current()
        elif previous.show_hints != settings.show_hints:
            self.reset()

    # ------------------------------------------------------------------
    # Response capture (ignored unless READY)
    # ------------------------------------------------------------------

    def set_blank_input(self, position: int, text: str) -> bool:
        if not self.is_ready:
            return False
        self.engine.set_blank_input(position, text)
        return True

    def pick_from_bank(self, bank_index: int) -> str | None:
        if not self.is_ready:
            return None
        return self.engine.pick_from_bank(bank_index)

    def remove_from_selection(self, selection_index: int) -> str | None:
        if not self.is_ready:
            return None
        return self.engine.remove_from_selection(selection_index)

    def move_within_selection(self, from_index: int, to_index: int) -> bool:
        if not self.is_ready:
            return False
        self.engine.move_within_selection(from_index, to_index)
        return True

    def set_input(self, text: str) -> bool:
        if not self.is_ready:
            return False
        self.engine.set_input(text)
        return True

    def reveal_more(self) -> int | None:
        if not self.is_ready:
            return None
        return self.engine.reveal_more()

    def check_answer(self) -> GameResult | None:
        if not self.is_ready:
            return None
        return self.engine.check_answer()

    def toggle_answer(self) -> bool | None:
        if not self.is_ready:
            return None
        return self.engine.toggle_answer()
