"""
Server Response Dispatch.

Maps the method of the request a response answers to the decoder for its
``result`` field. The JSON-RPC layer only knows the method name, this module
knows what shape comes back.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from lsprotocol.types import TEXT_DOCUMENT_CODE_ACTION

from .errors import DecodeError
from .sumtypes import CommandOrCodeAction, decode_command_or_code_action_list
from .types import JSONValue, load_json

logger = logging.getLogger(__name__)

# Receives the already-parsed ``result`` value
ResultDecoder = Callable[[JSONValue], Any]


def decode_code_action_result(result: JSONValue) -> Optional[List[CommandOrCodeAction]]:
    """``textDocument/codeAction`` returns ``(Command | CodeAction)[] | null``."""
    if result is None:
        return None
    return decode_command_or_code_action_list(result)


class ResultDecoderRegistry:
    """Registry of result decoders keyed by LSP method name."""

    def __init__(self):
        self._decoders: Dict[str, ResultDecoder] = {}

    def register(self, method: str, decoder: ResultDecoder) -> None:
        if method in self._decoders:
            logger.debug(f"Replacing result decoder for {method}")
        self._decoders[method] = decoder

    def get(self, method: str) -> Optional[ResultDecoder]:
        return self._decoders.get(method)

    def methods(self) -> List[str]:
        return sorted(self._decoders)

    def decode(self, method: str, raw: Union[str, bytes, bytearray]) -> Any:
        """
        Decode a raw ``result`` payload for ``method``.

        Raises:
            DecodeError: If the method has no decoder or the payload does not
                match the expected shape.
        """
        decoder = self._decoders.get(method)
        if decoder is None:
            raise DecodeError(f"No result decoder registered for method '{method}'")

        value = decoder(load_json(raw))
        logger.debug(f"Decoded {method} result as {type(value).__name__}")
        return value


def create_default_registry() -> ResultDecoderRegistry:
    """Registry with every method this package knows how to decode."""
    registry = ResultDecoderRegistry()
    registry.register(TEXT_DOCUMENT_CODE_ACTION, decode_code_action_result)
    return registry


default_registry = create_default_registry()


def decode_server_response_result(method: str, raw: Union[str, bytes, bytearray]) -> Any:
    """Decode a server response result using the default registry."""
    return default_registry.decode(method, raw)
