"""Unit tests for lsp_wire.core: URI codec, payload models, union holder and dispatch."""
