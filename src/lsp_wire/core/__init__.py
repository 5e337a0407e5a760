"""
Core modules for lsp-wire.

This package contains the wire codecs:
- uri: file:// URI <-> local path (DocumentURI, PathStyle)
- types: Command and CodeAction models
- sumtypes: the Command | CodeAction holder
- dispatch: method name -> result decoder
"""

from .dispatch import (
    ResultDecoderRegistry, create_default_registry, decode_server_response_result
)
from .errors import DecodeError, InvalidURIError, LspWireError, UnsetAccessError
from .result import Err, Ok, Result
from .sumtypes import (
    ActionVariant, CommandOrCodeAction,
    decode_command_or_code_actions, encode_command_or_code_actions
)
from .types import CodeAction, Command
from .uri import DocumentURI, PathStyle

__all__ = [
    # URI
    "DocumentURI", "PathStyle",
    # Models
    "Command", "CodeAction",
    # Union
    "ActionVariant", "CommandOrCodeAction",
    "decode_command_or_code_actions", "encode_command_or_code_actions",
    # Dispatch
    "ResultDecoderRegistry", "create_default_registry", "decode_server_response_result",
    # Errors
    "LspWireError", "InvalidURIError", "DecodeError", "UnsetAccessError",
    "Ok", "Err", "Result",
]
