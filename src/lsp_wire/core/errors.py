"""
Error types raised by the lsp-wire codecs.
"""


class LspWireError(Exception):
    """Base class for all lsp-wire errors."""


class InvalidURIError(LspWireError, ValueError):
    """
    A wire URI could not be turned into a document path.

    Raised for a non-file scheme, a remote authority, a broken percent-escape
    or percent-decoded bytes that are not valid UTF-8.
    """

    def __init__(self, message: str, uri: str | None = None):
        super().__init__(message)
        self.uri = uri


class DecodeError(LspWireError, ValueError):
    """A JSON payload is malformed or matches none of the expected shapes."""


class UnsetAccessError(LspWireError, LookupError):
    """A CommandOrCodeAction holder was read before a value was set or decoded."""
