import argparse
import logging
import random
import sys
from pathlib import Path

from rich.console import Console

from errors import BibleApiError, InvalidMoveError, VerseSourceError
from games import FillBlankChallenge, GameEngine
from models import GameType, SessionStatus, Settings, Verse
from session import PracticeSession
from sources import BibleApiClient, ResponseCache, VerseResolver, load_verses
from storage import (
    DEFAULT_DB_PATH,
    KeyValueStore,
    SettingsRepository,
    SQLiteSettingsRepository,
    get_kv_store,
)
from ui import TrainerUI

DB_PATH = DEFAULT_DB_PATH

VIEWS = ("learn", "practice", "settings")

GAME_COMMANDS: dict[str, GameType] = {
    "1": GameType.FILL_BLANK,
    "fill": GameType.FILL_BLANK,
    "2": GameType.WORD_ORDER,
    "order": GameType.WORD_ORDER,
    "3": GameType.TYPING,
    "type": GameType.TYPING,
}

HELP_LINES = [
    "learn | practice | settings   switch view",
    "n / p / v <#>                 next, previous, jump to verse",
    "1 fill | 2 order | 3 type     choose a game",
    "b <blank#> <word>             fill one blank",
    "f <word> <word> ...           fill blanks in order",
    "t <word#>                     take a word from the bank",
    "u <slot#>                     send a placed word back",
    "m <from> <to>                 move a placed word",
    "i <text>                      type the verse",
    "h                             reveal more words",
    "c / a / r                     check, show/hide answer, reset",
    "ref / list                    toggle reference, list verses",
    "q                             save and quit",
]

SETTINGS_FIELDS = {
    "csv": "csv_url",
    "key": "bible_api_key",
    "bible": "selected_bible_id",
    "language": "selected_language",
}

SETTINGS_FLAGS = {
    "api": "use_api_version",
    "hints": "show_hints",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Bible Verse Practice")
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="CSV URL or file path to load verses from (overrides settings)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=DB_PATH,
        help=f"Settings database path (default: {DB_PATH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible blanks and shuffles",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output",
    )
    return parser


def parse_command(line: str) -> tuple[str, str]:
    """Split a command line into (command, rest of line)."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    return parts[0].lower(), parts[1] if len(parts) > 1 else ""


def parse_flag(value: str) -> bool:
    value = value.strip().lower()
    if value in ("on", "true", "yes", "1"):
        return True
    if value in ("off", "false", "no", "0"):
        return False
    raise ValueError(f"Expected on or off, got {value!r}")


def load_verse_list(location: str, ui: TrainerUI) -> list[Verse]:
    """Load verses for the shell, showing a banner instead of failing."""
    if not location:
        return []
    try:
        verses = load_verses(location)
    except VerseSourceError:
        ui.show_banner("Failed to load verses. Please check the CSV URL.")
        return []

    if not verses:
        ui.show_banner("No verses found in CSV. Please check the format.")
    return verses


class TrainerShell:
    """Reads commands and dispatches them to the practice session."""

    def __init__(
        self,
        ui: TrainerUI,
        session: PracticeSession,
        settings_repo: SettingsRepository,
        csv_override: str | None = None,
    ):
        self.ui = ui
        self.session = session
        self.settings_repo = settings_repo
        self.csv_override = csv_override
        self.view = "practice"
        self.show_reference = False
        self.bibles: list[dict] = []

    @property
    def settings(self) -> Settings:
        return self.session.settings

    def render(self) -> None:
        session = self.session
        if self.view == "settings":
            self.ui.show_settings(self.settings, self.bibles)
        elif session.status == SessionStatus.NO_CONTENT:
            self.ui.show_no_content()
        elif session.status == SessionStatus.LOADING:
            self.ui.show_loading()
        elif self.view == "learn":
            self.ui.show_verse(
                session.display_verse,
                session.current_index,
                len(session.verses),
                self.show_reference,
            )
        else:
            self.ui.show_challenge(
                session.display_verse,
                session.challenge,
                self.settings.show_hints,
                session.current_index,
                len(session.verses),
            )

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the user quits."""
        command, arg = parse_command(line)
        if not command:
            return True
        if command in ("q", "quit", "exit"):
            return False

        try:
            if not self._dispatch(command, arg):
                self.ui.show_error(f"Unknown command: {command} (type 'help')")
        except InvalidMoveError as e:
            self.ui.show_error(str(e))
        except ValueError:
            self.ui.show_error(f"Invalid arguments for '{command}' (type 'help')")
        return True

    def _dispatch(self, command: str, arg: str) -> bool:
        session = self.session

        if command in VIEWS:
            self.view = command
        elif command == "help":
            self.ui.show_help(HELP_LINES)
        elif command in ("n", "next"):
            session.next()
            self.show_reference = False
        elif command in ("p", "prev", "previous"):
            session.previous()
            self.show_reference = False
        elif command == "v":
            session.select(int(arg) - 1)
            self.show_reference = False
        elif command == "list":
            self.ui.show_verse_list(session.verses, session.current_index)
        elif command == "ref":
            self.show_reference = not self.show_reference
        elif command in GAME_COMMANDS:
            session.set_game_type(GAME_COMMANDS[command])
            self.view = "practice"
        elif command in ("r", "reset"):
            session.reset()
        elif command in ("c", "check"):
            result = session.check_answer()
            if result is not None:
                self.ui.record_result(result.is_correct)
        elif command in ("a", "answer"):
            session.toggle_answer()
        elif command == "b":
            number, _, word = arg.partition(" ")
            self._fill_blank(int(number), word)
        elif command == "f":
            for number, word in enumerate(arg.split(), 1):
                self._fill_blank(number, word)
        elif command == "t":
            session.pick_from_bank(int(arg) - 1)
        elif command == "u":
            session.remove_from_selection(int(arg) - 1)
        elif command == "m":
            from_slot, to_slot = arg.split()
            session.move_within_selection(int(from_slot) - 1, int(to_slot) - 1)
        elif command == "i":
            session.set_input(arg)
        elif command == "h":
            session.reveal_more()
        elif command == "set":
            self._change_setting(arg)
        elif command == "bibles":
            self._load_bibles()
        elif command == "clear-cache":
            self.session.resolver.clear_cache()
            self.ui.show_success("Cache cleared successfully!")
        elif command == "reload":
            self.reload_verses()
        else:
            return False
        return True

    def _fill_blank(self, number: int, word: str) -> None:
        challenge = self.session.challenge
        if not isinstance(challenge, FillBlankChallenge):
            raise InvalidMoveError("Fill in the blank is not the active game")
        positions = challenge.blank_positions
        if not 1 <= number <= len(positions):
            raise InvalidMoveError(f"There is no blank {number}")
        self.session.set_blank_input(positions[number - 1], word.strip())

    def _client(self) -> BibleApiClient:
        return self.session.resolver.client_for(self.settings.bible_api_key)

    def _change_setting(self, arg: str) -> None:
        name, _, value = arg.partition(" ")
        name = name.lower()
        value = value.strip()

        if name in SETTINGS_FIELDS:
            update = {SETTINGS_FIELDS[name]: value}
        elif name in SETTINGS_FLAGS:
            update = {SETTINGS_FLAGS[name]: parse_flag(value)}
        else:
            self.ui.show_error(f"Unknown setting: {name}")
            return

        settings = self.settings.model_copy(update=update)
        self.settings_repo.save(settings)
        self.session.update_settings(settings)

        if name == "csv":
            self.csv_override = None
            self.reload_verses()
        elif name in ("key", "language") and settings.use_api_version:
            self._load_bibles()

    def _load_bibles(self) -> None:
        try:
            self.bibles = self._client().get_bibles(self.settings.selected_language)
        except BibleApiError:
            self.bibles = []
            self.ui.show_error("Failed to load Bible versions. Please check your API key.")

    def reload_verses(self) -> None:
        location = self.csv_override or self.settings.csv_url
        self.session.set_verses(load_verse_list(location, self.ui))

    def run(self) -> None:
        while True:
            self.render()
            line = self.ui.get_command(self.view)
            if not self.handle(line):
                break


def build_resolver(store: KeyValueStore) -> VerseResolver:
    """Resolver whose API clients share the persistent response cache."""
    return VerseResolver(cache=ResponseCache(store))


def run_interactive(args) -> None:
    """Run the interactive practice shell."""
    console = Console()
    ui = TrainerUI(console)

    store = get_kv_store(args.db)
    settings_repo = SQLiteSettingsRepository(store)
    settings = settings_repo.load()

    ui.clear_screen()
    verses = load_verse_list(args.csv or settings.csv_url, ui)
    ui.show_welcome(len(verses))

    session = PracticeSession(
        verses,
        settings=settings,
        resolver=build_resolver(store),
        engine=GameEngine(rng=random.Random(args.seed)),
    )
    shell = TrainerShell(ui, session, settings_repo, csv_override=args.csv)

    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        pass

    settings_repo.save(session.settings)
    ui.show_quit_message()


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    run_interactive(args)


if __name__ == "__main__":
    main()
