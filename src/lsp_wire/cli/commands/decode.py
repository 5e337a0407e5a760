"""
Decode Command - Decode a server response result for an LSP method.
"""

import sys
from typing import IO

import click

from ...core.dispatch import decode_server_response_result, default_registry
from ...core.errors import DecodeError
from ...core.sumtypes import CommandOrCodeAction, encode_command_or_code_actions
from ..utils import echo_error, echo_info


@click.command()
@click.argument("method")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print the re-encoded JSON instead of a summary")
def decode(method: str, source: IO[bytes], as_json: bool) -> None:
    """
    Decode the JSON result of METHOD read from SOURCE (stdin by default).

    \b
    Example:
      lsp-wire decode textDocument/codeAction response.json
    """
    try:
        value = decode_server_response_result(method, source.read())
    except DecodeError as e:
        echo_error(f"Failed to decode {method} result: {e}")
        if default_registry.get(method) is None:
            echo_info(f"Supported methods: {', '.join(default_registry.methods())}")
        sys.exit(1)

    if value is None:
        click.echo("null" if as_json else "No result")
        return

    if as_json:
        click.echo(encode_command_or_code_actions(value))
        return

    click.echo(f"{len(value)} item(s):")
    for index, holder in enumerate(value):
        click.echo(f"  [{index}] {_describe(holder)}")


def _describe(holder: CommandOrCodeAction) -> str:
    item = holder.get()
    return f"{holder.variant.value}: {item.title}"
