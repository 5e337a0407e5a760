"""
URI Commands - Convert between file:// URIs and local paths.
"""

import sys
from typing import List, Tuple

import click

from ...core.errors import InvalidURIError
from ...core.result import Result, capture
from ...core.uri import DocumentURI, PathStyle
from ..utils import echo_error


@click.group()
def uri():
    """Convert between file:// URIs and local paths."""
    pass


@uri.command("to-path")
@click.argument("uris", nargs=-1, required=True)
def to_path(uris: Tuple[str, ...]) -> None:
    """
    Print the local path of each URI.

    \b
    Example:
      lsp-wire uri to-path 'file:///c%3A/Users/test/Sketch.ino'
    """
    results: List[Result] = [capture(DocumentURI.from_url, raw, InvalidURIError) for raw in uris]
    _report(results)


@uri.command("from-path")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--style",
    type=click.Choice([s.value for s in PathStyle]),
    default=None,
    help="Separator convention of the given paths (defaults to this platform's)",
)
def from_path(paths: Tuple[str, ...], style: str | None) -> None:
    """
    Print the wire URI of each path.

    \b
    Example:
      lsp-wire uri from-path --style windows 'C:\\Users\\test\\Sketch.ino'
    """
    path_style = PathStyle(style) if style else None
    results: List[Result] = [
        capture(lambda p: DocumentURI.from_path(p, style=path_style), raw, ValueError)
        for raw in paths
    ]
    _report(results, as_uri=True)


def _report(results: List[Result], as_uri: bool = False) -> None:
    failed = 0
    for result in results:
        if result.is_ok():
            value: DocumentURI = result.unwrap()
            click.echo(str(value) if as_uri else value.unbox())
        else:
            failed += 1
            echo_error(str(result.error))

    if failed:
        sys.exit(1)
