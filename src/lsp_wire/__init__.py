"""
lsp-wire: wire-level codecs for Language Server Protocol clients.
"""

from .core import (
    ActionVariant,
    CodeAction,
    Command,
    CommandOrCodeAction,
    DecodeError,
    DocumentURI,
    InvalidURIError,
    LspWireError,
    PathStyle,
    UnsetAccessError,
    decode_server_response_result,
)

__version__ = "0.1.0"

__all__ = [
    "ActionVariant",
    "CodeAction",
    "Command",
    "CommandOrCodeAction",
    "DecodeError",
    "DocumentURI",
    "InvalidURIError",
    "LspWireError",
    "PathStyle",
    "UnsetAccessError",
    "decode_server_response_result",
]
