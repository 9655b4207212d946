"""
Basketball Stats CLI

Command-line interface for tracking per-game stats for a roster of players.

Usage:
    hoopstats [OPTIONS] COMMAND [ARGS]...

Commands:
    session   Interactive roster session (add players, record games, export)
"""

import click
import logging
import sys
from dotenv import load_dotenv

# Load .env file
load_dotenv()

from ..config import Config


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('--export-path', default=None, help='Where to write the JSON export')
@click.option('--strict', is_flag=True,
              help='Reject blank names and unknown players instead of ignoring them')
@click.option('--count-free-throws', is_flag=True,
              help='Add made free throws to total points')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, export_path, strict, count_free_throws, verbose, quiet):
    """Basketball Pro Stats - Track games and per-game averages for a roster."""
    # Configure logging based on verbosity
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    try:
        config = Config.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))
    if export_path:
        config.export_path = export_path
    if strict:
        config.strict = True
    if count_free_throws:
        config.count_free_throws = True

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose


# Import and register commands
from .session import session

cli.add_command(session)


if __name__ == '__main__':
    cli()
