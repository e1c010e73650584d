from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    ChallengePanel,
    ProgressTracker,
    SettingsPanel,
    VerseList,
    VersePanel,
)
from ui.styles import (
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    PARCHMENT_GOLD,
    create_welcome_banner,
)
from typing import Optional, List

from models import ResolvedVerse, Settings, Verse


class TrainerUI:
    """Main UI orchestrator for the verse trainer."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.progress_tracker = ProgressTracker()

    def show_welcome(self, verse_count: int) -> None:
        """Display the welcome banner."""
        self.console.print(create_welcome_banner())
        self.console.print(
            Text(
                f"Practice and memorize Bible verses • {verse_count} verses loaded",
                style=MUTED_GRAY,
            )
        )
        self.console.print(
            Text("Views: learn · practice · settings   ('help' for commands, 'q' to quit)\n", style=MUTED_GRAY)
        )

    def show_verse(
        self,
        verse: Optional[ResolvedVerse],
        index: int,
        total: int,
        show_reference: bool,
    ) -> None:
        self.console.print(VersePanel(verse, index, total, show_reference))

    def show_verse_list(self, verses: List[Verse], current_index: int) -> None:
        self.console.print(VerseList(verses, current_index))

    def show_challenge(
        self,
        verse: ResolvedVerse,
        challenge,
        show_hints: bool,
        index: int,
        total: int,
    ) -> None:
        self.console.print(
            ChallengePanel(verse, challenge, show_hints=show_hints, index=index, total=total)
        )

    def show_loading(self) -> None:
        self.console.print(Text("Loading verse...", style=PARCHMENT_GOLD))

    def show_no_content(self) -> None:
        """Display the empty state when no verses are loaded."""
        self.console.print(
            Panel(
                Text(
                    "No verses available.\n\nPlease configure your verses in Settings first "
                    "(type 'settings', then 'set csv <url or path>').",
                    style=MUTED_GRAY,
                ),
                title="Practice Games",
                border_style=MUTED_GRAY,
            )
        )

    def show_settings(self, settings: Settings, bibles: Optional[List[dict]] = None) -> None:
        self.console.print(SettingsPanel(settings, bibles))

    def show_help(self, lines: List[str]) -> None:
        self.console.print(
            Panel(Text("\n".join(lines), style=INFO_BLUE), title="Commands", border_style=INFO_BLUE)
        )

    def get_command(self, view: str) -> str:
        """Read one command line from the user."""
        return self.console.input(Text(f"{view}> ", style=f"bold {MUTED_GRAY}")).strip()

    def show_banner(self, message: str) -> None:
        """Display a non-fatal error banner."""
        self.console.print(
            Panel(
                Text(f"⚠️ {message}", style=ERROR_RED),
                border_style=ERROR_RED,
            )
        )

    def show_error(self, message: str) -> None:
        """Display an inline error message."""
        self.console.print(Text(message, style=ERROR_RED))

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(message, style=SUCCESS_GREEN))

    def record_result(self, is_correct: bool) -> None:
        self.progress_tracker.update(is_correct)

    def show_quit_message(self) -> None:
        """Display the session summary and goodbye message."""
        self.console.print()
        if self.progress_tracker.checked:
            self.console.print(self.progress_tracker)
        self.console.print(
            Text("👋 Goodbye! Your settings have been saved.", style=MUTED_GRAY)
        )

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()
