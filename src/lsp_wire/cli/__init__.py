"""Command line interface for lsp-wire."""
