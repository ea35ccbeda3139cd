"""Exceptions raised by the YouTrack client."""


class YouTrackError(Exception):
    """Base class for errors reported by the YouTrack client."""


class YouTrackCommandError(YouTrackError):
    """Raised when YouTrack understood a command but refused to apply it.

    Attributes:
        message: The error message reported by the server, or a generic
            fallback when the response body carried none.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class YouTrackProtocolError(YouTrackError):
    """Raised when a YouTrack response does not honor the documented contract.

    Attributes:
        location: The ``Location`` header value that could not be interpreted.
    """

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location
