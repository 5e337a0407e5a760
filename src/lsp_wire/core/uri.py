"""
Document URI Codec.

Converts between the ``file://`` URIs used on the LSP wire and local
filesystem paths.

Internally a DocumentURI only keeps a normalized path:
- separators are always '/'
- a Windows drive letter is lower case and not preceded by '/' ("c:/Users/...")
- any other path is rooted at '/'

The lower-case drive letter follows VS Code, which sends ``file:///c%3A/...``
no matter how the user typed the path.
"""

import json
import logging
import os
import posixpath
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, Union
from urllib.parse import quote, unquote_to_bytes, urlsplit

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..config import ACCEPTED_AUTHORITIES, FILE_SCHEME, URI_PATH_SAFE_CHARS
from .errors import InvalidURIError

logger = logging.getLogger(__name__)

_DRIVE = re.compile(r"^[a-zA-Z]:")
_ROOTED_DRIVE = re.compile(r"^/[a-zA-Z]:")
_BROKEN_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_UNSAFE_RAW = re.compile(r"[\x00-\x20\x7f]")


class PathStyle(StrEnum):
    """Separator convention of a local path handed to DocumentURI.from_path."""
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> "PathStyle":
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    def to_slash(self, path: str) -> str:
        if self is PathStyle.WINDOWS:
            return path.replace("\\", "/")
        return path

    def from_slash(self, path: str) -> str:
        if self is PathStyle.WINDOWS:
            return path.replace("/", "\\")
        return path


def _normalize(path: str) -> str:
    if _ROOTED_DRIVE.match(path):
        path = path[1:]
    if _DRIVE.match(path):
        return path[0].lower() + path[1:]
    if not path.startswith("/"):
        return "/" + path
    return path


@dataclass(frozen=True, order=True, repr=False)
class DocumentURI:
    """
    A document location as exchanged with a language server.

    Build one with ``from_path`` (outbound) or ``from_url`` (inbound).
    ``str(uri)`` gives the wire form, ``unbox()`` the local path.
    Equality, hashing and ordering use the normalized path, so two URIs
    that only differ in percent-encoding or drive-letter case are equal.
    """
    path: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Document URI path must not be empty")
        try:
            self.path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidURIError(f"Path is not valid UTF-8 text: {self.path!r}") from e
        object.__setattr__(self, "path", _normalize(self.path))

    @classmethod
    def from_path(
        cls,
        path: Union[str, "os.PathLike[str]"],
        style: PathStyle | None = None,
    ) -> "DocumentURI":
        """
        Create a URI for a local path.

        Args:
            path: Local path, in the separator convention of ``style``.
            style: How to read separators. Defaults to the host convention.

        Raises:
            ValueError: If the path is empty.
            InvalidURIError: If the path is not valid UTF-8 text.
        """
        raw = os.fspath(path)
        if not raw:
            raise ValueError("Cannot build a document URI from an empty path")
        style = style or PathStyle.host()
        return cls(style.to_slash(raw))

    @classmethod
    def from_url(cls, raw: str) -> "DocumentURI":
        """
        Parse a ``file://`` URI received from the wire.

        Percent-escapes are decoded byte-wise and re-assembled as UTF-8, so a
        codepoint split over several escapes (``%F0%9F%98%9B``) comes back
        whole. ``/c%3A/...`` and ``/C:/...`` both become ``c:/...``.
        Query and fragment are ignored.

        Raises:
            InvalidURIError: If the URI holds raw whitespace or control
                characters, is not a local file URI, or its path is not
                valid percent-encoded UTF-8.
        """
        if _UNSAFE_RAW.search(raw):
            raise InvalidURIError(f"URI contains whitespace or control characters: {raw!r}", uri=raw)
        try:
            parts = urlsplit(raw)
        except ValueError as e:
            raise InvalidURIError(f"Malformed URI: {raw!r}", uri=raw) from e

        if parts.scheme != FILE_SCHEME:
            raise InvalidURIError(
                f"Invalid URI scheme '{parts.scheme}', expected '{FILE_SCHEME}': {raw!r}", uri=raw
            )
        if parts.netloc.lower() not in ACCEPTED_AUTHORITIES:
            raise InvalidURIError(f"Remote file URIs are not supported: {raw!r}", uri=raw)
        if not parts.path:
            raise InvalidURIError(f"URI has no path: {raw!r}", uri=raw)
        if _BROKEN_ESCAPE.search(parts.path):
            raise InvalidURIError(f"Invalid percent-escape in URI: {raw!r}", uri=raw)

        try:
            decoded = unquote_to_bytes(parts.path).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidURIError(f"URI path is not valid UTF-8: {raw!r}", uri=raw) from e

        if parts.query or parts.fragment:
            logger.debug(f"Ignoring query/fragment of document URI {raw!r}")

        return cls(decoded)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "DocumentURI":
        """Decode a JSON string literal holding a wire URI."""
        try:
            value = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidURIError(f"Malformed JSON for document URI: {e}") from e
        if not isinstance(value, str):
            raise InvalidURIError(f"Document URI must be a JSON string, got {type(value).__name__}")
        return cls.from_url(value)

    def to_json(self) -> str:
        return json.dumps(self.to_string())

    def to_string(self) -> str:
        path = self.path
        if _DRIVE.match(path):
            path = "/" + path[0].lower() + path[1:]
        return f"{FILE_SCHEME}://{quote(path, safe=URI_PATH_SAFE_CHARS)}"

    def unbox(self) -> str:
        """Return the normalized path, without scheme or escaping."""
        return self.path

    def to_fs_path(self, style: PathStyle | None = None) -> str:
        """Return the path with the separators of ``style`` (host by default)."""
        return (style or PathStyle.host()).from_slash(self.path)

    def as_path(self) -> Path:
        return Path(self.to_fs_path())

    @property
    def ext(self) -> str:
        return posixpath.splitext(self.path)[1]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DocumentURI({self.to_string()!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Wire strings validate through from_url, so DocumentURI works as a
        # model field and as a dict key type.
        from_wire = core_schema.no_info_after_validator_function(
            cls.from_url, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_wire,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_wire]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, info_arg=False, return_schema=core_schema.str_schema()
            ),
        )
