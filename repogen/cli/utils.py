from collections.abc import Callable

import typer
from hotlog import configure_logging, get_logger, resolve_verbosity

from repogen.exceptions import log_exception

logger = get_logger(__name__)


def setup_logging(verbose: int) -> None:
    """Set up logging configuration for CLI commands.

    Args:
        verbose: Verbosity level (0=normal, 1=verbose, 2=debug)
    """
    verbosity = resolve_verbosity(verbose=verbose)
    configure_logging(verbosity=verbosity)


def run_cli_command(func: Callable[[], int]) -> None:
    """Execute a CLI command function with proper exception handling.

    Any exception is logged and results in typer.Exit(1); successful
    execution results in typer.Exit(exit_code). KeyboardInterrupt is not
    caught and aborts the command.

    Args:
        func: A callable that takes no arguments and returns an exit code (int)
    """
    try:
        exit_code = func()
    except Exception as err:
        log_exception(logger, err)
        raise typer.Exit(1) from err
    else:
        raise typer.Exit(exit_code)
