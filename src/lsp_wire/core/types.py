"""
LSP payload models.

Only the Command and CodeAction shapes are modeled. Nested payloads this
package does not interpret (diagnostics, workspace edits, user data) are kept
as plain JSON values so they re-encode exactly as received.

Field order on each model is the canonical key order used on marshal.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from ..config import JSON_SEPARATORS
from .errors import DecodeError

JSONValue = Any


class LspModel(BaseModel):
    """
    Base for wire models.

    Fields use the snake_case Python name and the camelCase LSP name as alias;
    both are accepted on construction.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, JSONValue]:
        """
        Dump to a JSON-ready dict with LSP key names.

        Fields that were never set are left out rather than sent as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Command(LspModel):
    """A reference to a command the client can execute."""
    title: StrictStr
    command: StrictStr
    arguments: Optional[List[JSONValue]] = None


class CodeAction(LspModel):
    """A change that can be performed in code, e.g. to fix a problem."""
    title: StrictStr
    kind: Optional[StrictStr] = None
    diagnostics: Optional[List[Dict[str, JSONValue]]] = None
    is_preferred: Optional[StrictBool] = Field(default=None, alias="isPreferred")
    disabled: Optional[Dict[str, JSONValue]] = None
    edit: Optional[Dict[str, JSONValue]] = None
    command: Optional[Command] = None
    data: Optional[JSONValue] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _kind_value(cls, value: Any) -> Any:
        # Accept lsprotocol's CodeActionKind members as well as plain strings
        if isinstance(value, Enum):
            return value.value
        return value


def load_json(raw: Union[str, bytes, bytearray]) -> JSONValue:
    """Parse raw JSON, reporting syntax errors as DecodeError."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Malformed JSON: {e}") from e


def dump_json(value: JSONValue) -> str:
    """Serialize to compact JSON, non-ASCII kept as UTF-8 text."""
    return json.dumps(value, separators=JSON_SEPARATORS, ensure_ascii=False)
