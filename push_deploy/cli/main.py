# push_deploy/cli/main.py
"""Main CLI entry point for push-deploy"""

import os
import sys
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .decorators import Context
from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL

# Import all commands
from .commands import (
    init,
    hook,
    deploy,
    services,
    status,
)

console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-C', '--directory', type=click.Path(file_okay=False),
              help='Base directory (default: current directory)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, directory, verbose, debug, quiet):
    """push-deploy - deploy on git push

    Each commit pushed to the primary branch is checked out into
    versions/<commit>/work, initialised, and made live through the
    `current` link. Running services whose unit files or web-server
    config link into the deployment are stopped before the switch and
    started after it.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(directory=directory, verbose=verbose, debug=debug)


# Register commands
cli.add_command(init.init)
cli.add_command(hook.post_receive_hook)
cli.add_command(deploy.deploy)
cli.add_command(services.services)
cli.add_command(status.status)


def main():
    """Main entry point for the CLI application

    Handles keyboard interrupts and unexpected exceptions.
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
