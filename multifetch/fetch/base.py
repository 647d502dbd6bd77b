class FetchError(Exception):
    """A single URL could not be fetched: connection, transport or body read failure."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url

class DecodeError(ValueError):
    """Inbound payload is not a JSON array of URL strings."""
