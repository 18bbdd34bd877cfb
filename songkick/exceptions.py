class SongKickError(Exception):
    """Base class for songkick errors."""


class MissingApiKey(SongKickError):
    """No api key was configured."""


class BuilderConsumed(SongKickError):
    """Builder was used after it had been built."""


class ApiError(SongKickError):
    """Api responded with an error."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(f'{message} ({url})')
        self.message = message
        self.url = url
        self.status_code = status_code


class UnexpectedResponse(SongKickError):
    """Api response does not have the expected format."""
