"""
Wire Format Constants.

This module centralizes the fixed values of the LSP wire format handled by
lsp-wire: which URIs are accepted, which characters survive percent-encoding,
and how JSON is laid out when re-encoded.
"""

from typing import FrozenSet, Tuple

# --- URI Codec ---

# Only local file URIs are accepted on the wire
FILE_SCHEME = "file"

# Authorities that still name the local machine ("file:///x", "file://localhost/x")
ACCEPTED_AUTHORITIES: FrozenSet[str] = frozenset({"", "localhost"})

# Kept verbatim on encode, on top of the RFC 3986 unreserved set (A-Z a-z 0-9 - _ . ~)
URI_PATH_SAFE_CHARS = "/"

# --- JSON Codec ---

# Compact layout, matches what LSP servers put on the wire
JSON_SEPARATORS: Tuple[str, str] = (",", ":")

# Keys that only a CodeAction carries. Seeing any of them settles the variant.
CODE_ACTION_ONLY_FIELDS: FrozenSet[str] = frozenset({
    "kind",
    "isPreferred",
    "diagnostics",
    "edit",
    "disabled",
    "data",
})
