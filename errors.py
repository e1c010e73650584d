"""Exception types shared across the verse trainer."""


class VerseTrainerError(Exception):
    """Base class for errors raised by the verse trainer."""


class InvalidMoveError(VerseTrainerError, ValueError):
    """A response-capture call referenced a position that does not exist."""


class VerseSourceError(VerseTrainerError):
    """The verse list could not be fetched or read."""


class BibleApiError(VerseTrainerError):
    """A request to the scripture API failed or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
