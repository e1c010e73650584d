from rich.style import Style
from rich.text import Text

from models import BlankStatus

SCRIPTURE_BLUE = "#5B6ABF"
PARCHMENT_GOLD = "#E0B04B"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"


def get_blank_style(status: BlankStatus | None) -> Style:
    """Get style for a blank based on its last graded status."""
    if status == BlankStatus.CORRECT:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif status == BlankStatus.INCORRECT:
        return Style(color=ERROR_RED, bold=True, underline=True)
    elif status == BlankStatus.EMPTY:
        return Style(color=PARCHMENT_GOLD, underline=True)
    else:
        return Style(color=INFO_BLUE, underline=True)


def create_welcome_banner() -> Text:
    """Create the welcome banner text."""
    banner = Text()
    banner.append("╔══════════════════════════════════════╗\n", Style(color=SCRIPTURE_BLUE))
    banner.append("║        Bible Verse Practice          ║\n", Style(color=PARCHMENT_GOLD, bold=True))
    banner.append("╚══════════════════════════════════════╝", Style(color=SCRIPTURE_BLUE))
    return banner


def create_success_header() -> Text:
    """Create a success/correct answer header."""
    header = Text()
    header.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
    header.append("Correct! Well done!", Style(color=SUCCESS_GREEN, bold=True))
    return header


def create_error_header() -> Text:
    """Create an error/incorrect answer header."""
    header = Text()
    header.append("✗ ", Style(color=ERROR_RED, bold=True))
    header.append("Not quite right. Keep practicing!", Style(color=ERROR_RED, bold=True))
    return header
