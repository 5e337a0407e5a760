"""
lsp-wire CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import decode, uri
from .utils import configure_logging


@click.group()
@click.version_option(package_name="lsp-wire")
@click.option("-v", "--verbose", is_flag=True, help="Log codec decisions to stderr")
def main(verbose: bool):
    """lsp-wire: inspect LSP wire payloads.

    \b
    Quick Start:
      lsp-wire uri to-path 'file:///home/me/My%20Project/main.py'
      lsp-wire uri from-path --style windows 'C:\\src\\main.cpp'
      lsp-wire decode textDocument/codeAction response.json
    """
    configure_logging(verbose)


# Register commands
main.add_command(uri.uri)
main.add_command(decode.decode)

if __name__ == "__main__":
    main()
