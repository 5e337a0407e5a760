"""
Command | CodeAction union.

LSP results such as ``textDocument/codeAction`` return items that are either
a Command or a CodeAction, with no key on the wire saying which. The variant is
inferred from the object's structure when decoding and then kept as an
explicit ActionVariant, so callers match on it instead of inspecting types.
"""

import logging
from enum import StrEnum
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ..config import CODE_ACTION_ONLY_FIELDS
from .errors import DecodeError, UnsetAccessError
from .types import CodeAction, Command, JSONValue, dump_json, load_json

logger = logging.getLogger(__name__)

CommandOrCodeActionValue = Union[Command, CodeAction]


class ActionVariant(StrEnum):
    """Which side of the union a holder carries."""
    COMMAND = "Command"
    CODE_ACTION = "CodeAction"


def classify(obj: Dict[str, JSONValue]) -> ActionVariant:
    """
    Pick the variant an object most likely encodes.

    A CodeAction-only key, or a ``command`` that is itself an object, means
    CodeAction. Anything else is read as a Command.
    """
    if CODE_ACTION_ONLY_FIELDS.intersection(obj.keys()):
        return ActionVariant.CODE_ACTION
    if isinstance(obj.get("command"), dict):
        return ActionVariant.CODE_ACTION
    return ActionVariant.COMMAND


def decode_value(obj: JSONValue) -> CommandOrCodeActionValue:
    """
    Decode an already-parsed JSON object into a Command or CodeAction.

    An object without CodeAction-only keys must be a complete Command, so a
    bare ``{"title": ...}`` is rejected.

    Raises:
        DecodeError: If the object matches neither shape.
    """
    if not isinstance(obj, dict):
        raise DecodeError(f"Expected a JSON object for Command or CodeAction, got {type(obj).__name__}")

    if classify(obj) is ActionVariant.CODE_ACTION:
        try:
            return CodeAction.model_validate(obj)
        except ValidationError as e:
            raise DecodeError(f"Invalid CodeAction: {e}") from e

    try:
        return Command.model_validate(obj)
    except ValidationError as e:
        raise DecodeError(f"Invalid Command: {e}") from e


class CommandOrCodeAction:
    """
    Holder for exactly one of: nothing, a Command, a CodeAction.

    Example:
        holder = CommandOrCodeAction.from_json(raw)
        match holder.variant:
            case ActionVariant.COMMAND:
                run(holder.get().command)
            case ActionVariant.CODE_ACTION:
                apply(holder.get())
    """

    __slots__ = ("_variant", "_value")

    def __init__(self, value: Optional[CommandOrCodeActionValue] = None):
        self._variant: Optional[ActionVariant] = None
        self._value: Optional[CommandOrCodeActionValue] = None
        if value is not None:
            self.set(value)

    @classmethod
    def from_dict(cls, obj: JSONValue) -> "CommandOrCodeAction":
        return cls(decode_value(obj))

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray]) -> "CommandOrCodeAction":
        return cls.from_dict(load_json(data))

    @property
    def variant(self) -> Optional[ActionVariant]:
        return self._variant

    @property
    def is_set(self) -> bool:
        return self._variant is not None

    def set(self, value: CommandOrCodeActionValue) -> None:
        """
        Store a Command or a CodeAction.

        Raises:
            TypeError: For any other value. This is a caller bug, not bad input.
        """
        if isinstance(value, CodeAction):
            variant = ActionVariant.CODE_ACTION
        elif isinstance(value, Command):
            variant = ActionVariant.COMMAND
        else:
            raise TypeError(
                f"CommandOrCodeAction accepts Command or CodeAction, got {type(value).__name__}"
            )
        self._variant = variant
        self._value = value

    def get(self) -> CommandOrCodeActionValue:
        """
        Return the held Command or CodeAction.

        Raises:
            UnsetAccessError: If nothing was set or decoded yet.
        """
        if self._value is None:
            raise UnsetAccessError("CommandOrCodeAction has no value")
        return self._value

    def unmarshal_json(self, data: Union[str, bytes, bytearray]) -> None:
        """Decode ``data`` into this holder. On failure the holder is left untouched."""
        self.set(decode_value(load_json(data)))

    def to_dict(self) -> Dict[str, JSONValue]:
        return self.get().to_wire()

    def marshal_json(self) -> str:
        """Encode the held variant as compact JSON, with no wrapper or tag."""
        return dump_json(self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandOrCodeAction):
            return NotImplemented
        return self._variant == other._variant and self._value == other._value

    __hash__ = None  # mutable through set()

    def __repr__(self) -> str:
        if self._value is None:
            return "CommandOrCodeAction(<unset>)"
        return f"CommandOrCodeAction({self._value!r})"


def decode_command_or_code_actions(raw: Union[str, bytes, bytearray]) -> List[CommandOrCodeAction]:
    """Decode a JSON array of Command/CodeAction items."""
    return decode_command_or_code_action_list(load_json(raw))


def decode_command_or_code_action_list(items: JSONValue) -> List[CommandOrCodeAction]:
    """
    Decode an already-parsed JSON array, element by element.

    Order is kept. The first element that fails aborts the whole array.

    Raises:
        DecodeError: If ``items`` is not an array or any element is invalid.
    """
    if not isinstance(items, list):
        raise DecodeError(f"Expected a JSON array, got {type(items).__name__}")

    decoded: List[CommandOrCodeAction] = []
    for index, item in enumerate(items):
        try:
            decoded.append(CommandOrCodeAction.from_dict(item))
        except DecodeError as e:
            raise DecodeError(f"Invalid element at index {index}: {e}") from e

    logger.debug(
        f"Decoded {len(decoded)} items "
        f"({sum(1 for h in decoded if h.variant is ActionVariant.CODE_ACTION)} code actions)"
    )
    return decoded


def encode_command_or_code_actions(items: Iterable[CommandOrCodeAction]) -> str:
    """Encode holders as a compact JSON array."""
    return dump_json([item.to_dict() for item in items])
