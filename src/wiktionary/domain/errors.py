class WikiFetchError(Exception):
    """Base error for anything that goes wrong while fetching a wiki page."""

    def __init__(self, message: str, title: str | None = None) -> None:
        super().__init__(message)
        self.title = title


class ConnectivityError(WikiFetchError):
    """The wiki API could not be contacted."""


class ServerError(WikiFetchError):
    """The wiki API answered, but with an error."""


class ParseError(WikiFetchError):
    """The wiki API response could not be parsed."""
