"""CLI command modules for lsp-wire."""

from . import decode, uri

__all__ = ["decode", "uri"]
