from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich import box
from rich.console import Group
from typing import Optional, List

from games import FillBlankChallenge, TypingChallenge, WordOrderChallenge
from models import GameResult, GameType, ResolvedVerse, Settings, Verse
from ui.styles import (
    SCRIPTURE_BLUE,
    PARCHMENT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    TEXT_WHITE,
    create_error_header,
    create_success_header,
    get_blank_style,
)

GAME_LABELS = {
    GameType.FILL_BLANK: "Fill in the Blank",
    GameType.WORD_ORDER: "Word Order",
    GameType.TYPING: "Type It Out",
}

GAME_SUBTITLES = {
    GameType.FILL_BLANK: "b <blank#> <word> · f <words...> · c to check",
    GameType.WORD_ORDER: "t <word#> take · u <slot#> undo · m <from> <to> move · c to check",
    GameType.TYPING: "i <text> type · h more hints · c to check",
}


class VersePanel:
    """The learn view: one verse with its reference hidden until asked."""

    def __init__(
        self,
        verse: Optional[ResolvedVerse],
        index: int,
        total: int,
        show_reference: bool = False,
    ):
        self.verse = verse
        self.index = index
        self.total = total
        self.show_reference = show_reference

    def render(self) -> Panel:
        content = Text()
        content.append(f"Verse {self.index + 1} of {self.total}\n\n", Style(color=MUTED_GRAY))

        if self.verse is None:
            content.append("Loading verse...", Style(color=PARCHMENT_GOLD))
        else:
            content.append(f"\"{self.verse.text}\"\n\n", Style(color=TEXT_WHITE, italic=True))
            if self.show_reference:
                content.append(self.verse.reference, Style(color=SCRIPTURE_BLUE, bold=True))
                content.append(f"\n{self.verse.version}", Style(color=MUTED_GRAY))
            else:
                content.append("Reference hidden (type 'ref' to show)", Style(color=MUTED_GRAY))

        return Panel(
            Align.left(content),
            title="Learn Verses",
            subtitle="n next · p prev · ref toggle reference · v <#> jump",
            border_style=SCRIPTURE_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class VerseList:
    """All loaded verses, with the current one highlighted."""

    def __init__(self, verses: List[Verse], current_index: int):
        self.verses = verses
        self.current_index = current_index

    def render(self) -> Table:
        table = Table(
            show_header=True,
            header_style=Style(color=SCRIPTURE_BLUE, bold=True),
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        table.add_column("#", justify="right")
        table.add_column("Reference")
        table.add_column("Version", style=Style(color=MUTED_GRAY))

        for i, verse in enumerate(self.verses):
            style = Style(color=PARCHMENT_GOLD, bold=True) if i == self.current_index else Style()
            table.add_row(str(i + 1), Text(verse.reference, style=style), verse.version)

        return table

    def __rich__(self) -> Table:
        return self.render()


class ChallengePanel:
    """A styled panel for the active practice game."""

    def __init__(
        self,
        verse: ResolvedVerse,
        challenge,
        show_hints: bool = True,
        index: int = 0,
        total: int = 0,
    ):
        self.verse = verse
        self.challenge = challenge
        self.show_hints = show_hints
        self.index = index
        self.total = total

    def render(self) -> Panel:
        content = Text()
        if self.total > 0:
            content.append(f"Verse {self.index + 1}/{self.total}  ", Style(color=MUTED_GRAY))
        content.append(
            f"{self.verse.reference} ({self.verse.version})\n\n",
            Style(color=SCRIPTURE_BLUE, bold=True),
        )

        if isinstance(self.challenge, FillBlankChallenge):
            self._render_fill_blank(content)
        elif isinstance(self.challenge, WordOrderChallenge):
            self._render_word_order(content)
        elif isinstance(self.challenge, TypingChallenge):
            self._render_typing(content)

        if self.challenge.result is not None:
            content.append("\n\n")
            content.append(render_result(self.challenge.result))

        if self.challenge.show_answer:
            content.append("\n\nAnswer: ", Style(color=PARCHMENT_GOLD, bold=True))
            content.append(self.challenge.text, Style(color=TEXT_WHITE))

        game_type = self.challenge.game_type
        return Panel(
            Align.left(content),
            title=GAME_LABELS[game_type],
            subtitle=GAME_SUBTITLES[game_type],
            border_style=SCRIPTURE_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def _render_fill_blank(self, content: Text) -> None:
        blank_number = 0
        for position, token in enumerate(self.challenge.tokens):
            if not token.is_blank:
                content.append(f"{token.word} ", Style(color=TEXT_WHITE))
                continue

            blank_number += 1
            typed = self.challenge.inputs.get(position, "")
            status = self.challenge.statuses.get(position)
            content.append(f"[{blank_number}]", Style(color=MUTED_GRAY))
            if self.show_hints:
                content.append(f"({len(token.word)})", Style(color=MUTED_GRAY))
            content.append(typed or "____", get_blank_style(status))
            content.append(" ")

    def _render_word_order(self, content: Text) -> None:
        content.append("Your verse:\n", Style(color=MUTED_GRAY))
        if not self.challenge.selection:
            content.append("  Take words below to build the verse\n", Style(color=MUTED_GRAY, italic=True))
        else:
            content.append("  ")
            for i, word in enumerate(self.challenge.selection, 1):
                content.append(f"{i}.", Style(color=MUTED_GRAY))
                content.append(f"{word} ", Style(color=SUCCESS_GREEN, bold=True))
            content.append("\n")

        content.append("\nWord bank:\n  ", Style(color=MUTED_GRAY))
        for i, word in enumerate(self.challenge.bank, 1):
            content.append(f"{i}.", Style(color=MUTED_GRAY))
            content.append(f"{word} ", Style(color=PARCHMENT_GOLD))

    def _render_typing(self, content: Text) -> None:
        revealed = self.challenge.revealed_words
        if revealed:
            content.append("Revealed words: ", Style(color=MUTED_GRAY, bold=True))
            content.append(" ".join(revealed) + "...\n\n", Style(color=INFO_BLUE))

        content.append("Your text:\n  ", Style(color=MUTED_GRAY))
        if self.challenge.user_input:
            content.append(self.challenge.user_input, Style(color=TEXT_WHITE))
        else:
            content.append("Type the entire verse here...", Style(color=MUTED_GRAY, italic=True))

    def __rich__(self) -> Panel:
        return self.render()


def render_result(result: GameResult) -> Text:
    return create_success_header() if result.is_correct else create_error_header()


class SettingsPanel:
    """Current settings with the commands that change them."""

    def __init__(self, settings: Settings, bibles: Optional[List[dict]] = None):
        self.settings = settings
        self.bibles = bibles or []

    def render(self) -> Panel:
        table = Table(show_header=False, box=box.SIMPLE, border_style=MUTED_GRAY)
        table.add_column("Setting", style=Style(color=MUTED_GRAY))
        table.add_column("Value")
        table.add_column("Command", style=Style(color=MUTED_GRAY))

        key = self.settings.bible_api_key
        masked_key = f"{key[:4]}{'•' * max(0, len(key) - 4)}" if key else "(none)"

        table.add_row("CSV URL", self.settings.csv_url or "(none)", "set csv <url or path>")
        table.add_row(
            "Bible version",
            "API.Bible" if self.settings.use_api_version else "CSV",
            "set api on|off",
        )
        table.add_row("API key", masked_key, "set key <key>")
        table.add_row("Selected bible", self.settings.selected_bible_id or "(none)", "set bible <id>")
        table.add_row("Language", self.settings.selected_language, "set language <code>")
        table.add_row("Hints", "on" if self.settings.show_hints else "off", "set hints on|off")

        renderables = [table]

        if self.bibles:
            versions = Table(
                show_header=True,
                header_style=Style(color=SCRIPTURE_BLUE, bold=True),
                box=box.SIMPLE,
            )
            versions.add_column("Id")
            versions.add_column("Name")
            versions.add_column("Abbr.", style=Style(color=MUTED_GRAY))
            for bible in self.bibles:
                versions.add_row(
                    bible.get("id", ""),
                    bible.get("name", ""),
                    bible.get("abbreviation", ""),
                )
            renderables.append(versions)

        return Panel(
            Group(*renderables),
            title="Settings",
            subtitle="bibles · clear-cache · reload",
            border_style=PARCHMENT_GOLD,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ProgressTracker:
    """Track answer checks made during a session."""

    def __init__(self):
        self.checked = 0
        self.correct_count = 0
        self.incorrect_count = 0

    def update(self, is_correct: bool):
        self.checked += 1
        if is_correct:
            self.correct_count += 1
        else:
            self.incorrect_count += 1

    def render_session_summary(self) -> Panel:
        accuracy = (self.correct_count / self.checked * 100) if self.checked > 0 else 0

        stats = Table(show_header=False, border_style=MUTED_GRAY, box=box.SIMPLE)
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        stats.add_row("Checked", str(self.checked))
        stats.add_row("Correct", Text(f"{self.correct_count}", style=Style(color=SUCCESS_GREEN)))
        stats.add_row("Incorrect", Text(f"{self.incorrect_count}", style=Style(color=ERROR_RED)))
        stats.add_row(
            "Accuracy",
            Text(f"{accuracy:.0f}%", style=Style(color=PARCHMENT_GOLD, bold=True)),
        )

        return Panel(
            Align.center(stats),
            title="Session Summary",
            border_style=PARCHMENT_GOLD,
            box=box.HEAVY,
            padding=(1, 3),
        )

    def __rich__(self) -> Panel:
        return self.render_session_summary()
