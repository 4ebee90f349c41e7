"""Exceptions raised by the series renamer core."""


class RenamerError(Exception):
    """Base class for all series renamer errors."""
    pass


class CatalogError(RenamerError):
    """Exception raised when an episode list cannot be fetched."""
    pass


class NoIdentifierError(CatalogError):
    """The link does not contain an IMDb identifier."""

    def __init__(self, link: str):
        self.link = link
        super().__init__(f"No IMDb identifier found in link: {link!r}")


class NetworkError(CatalogError):
    """Transport-level failure talking to OMDb."""
    pass


class ApiError(CatalogError):
    """OMDb answered with a non-success HTTP status."""

    def __init__(self, status: int, message: str = ""):
        self.status = status
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"OMDb returned HTTP {status}{detail}")


class DecodeError(CatalogError):
    """OMDb answered with a body that is not a JSON object."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Could not decode OMDb response: {message}")


class ChannelDisconnectedError(RenamerError):
    """The fetch worker ended without delivering a result."""
    pass


class MissingExtensionError(RenamerError):
    """A file has no extension, so no target name can be built."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"missing extension: {filename}")
