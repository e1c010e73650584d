"""Verse Trainer UI Module - terminal interface for verse practice."""

from ui.app import TrainerUI
from ui.components import (
    ChallengePanel,
    ProgressTracker,
    SettingsPanel,
    VerseList,
    VersePanel,
)
from ui.styles import (
    SCRIPTURE_BLUE,
    PARCHMENT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "TrainerUI",
    "ChallengePanel",
    "ProgressTracker",
    "SettingsPanel",
    "VerseList",
    "VersePanel",
    "SCRIPTURE_BLUE",
    "PARCHMENT_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
