import logging
from typing import List, Optional

import typer

from elapsed import __version__
from elapsed.config import load_config
from elapsed.dispatch import Invocation, dispatch, parse_action
from elapsed.errors import ElapsedError, UsageError
from elapsed.store import TimerStore

logger = logging.getLogger(__name__)

HELP_TEXT = f"""
elapsed v{__version__}
  Usage: elapsed ACTION [NAME] [OPTIONS]
  ACTIONS:
    start [timer]   Set start time (with optional named timer).
    show [timer]    Output intermediate/final elapsed time (using named timer
                    if defined at start).
    stop [timer]    Optionally, stop (remove) previously started, optionally
                    named, timer.
  OPTIONS:
    -h, -?, --help  Output this help message.
    -n              Do not output the trailing newline character with show
                    action.
    -r              When used with the show action and following the elapsed
                    output, this will cause the timer to restart for the
                    next show action.
  TIMERS:
    Named timers are kept in $ELAPSED_DIR (default /tmp) unless the name
    begins with '/', in which case it is used as an absolute path.
  OUTPUT FORMAT:
    [0 days ][0 hours ][0 minutes ]0.000 seconds
    Examples:       1 minute 48.043 seconds
                    1 day 0 hours 17 minutes 54.941 seconds
"""


def unexpected_option(tokens: List[str]) -> Optional[str]:
    """First token that looks like an option, e.g. "-x" from "-xy"."""
    for token in tokens:
        if token.startswith("--"):
            return token
        if token.startswith("-") and len(token) > 1:
            return token[:2]
    return None


def print_help(value: bool) -> None:
    if value:
        typer.echo(HELP_TEXT)
        raise typer.Exit(code=1)


def timer(
    action: Optional[str] = typer.Argument(None, metavar="ACTION"),
    name: Optional[str] = typer.Argument(None, metavar="[NAME]"),
    extra: Optional[List[str]] = typer.Argument(None, hidden=True),
    suppress_newline: bool = typer.Option(
        False, "-n", help="Omit the trailing newline from show output."
    ),
    restart: bool = typer.Option(
        False, "-r", help="Restart the timer after show output."
    ),
    show_help: bool = typer.Option(
        False,
        "-h",
        "-?",
        "--help",
        is_eager=True,
        expose_value=False,
        callback=print_help,
        help="Output this help message.",
    ),
) -> None:
    """
    Start, show or stop a named elapsed-time timer.
    """
    positional = [token for token in (action, name, *(extra or [])) if token]

    try:
        option = unexpected_option(positional)
        if option:
            raise UsageError(
                f"Unexpected option: {option} (Terminated, see -h for help)"
            )
        if action is None:
            raise UsageError("Argument(s) expected. See -h for help")
        if extra:
            raise UsageError(
                f"Unexpected argument: {extra[0]} (Terminated, see -h for help)"
            )

        invocation = Invocation(
            action=parse_action(action),
            timer_name=name,
            suppress_newline=suppress_newline,
            restart=restart,
        )

        config = load_config()
        logging.getLogger("elapsed").setLevel(config.log_level.upper())

        dispatch(TimerStore(config), invocation, typer.echo)
    except ElapsedError as e:
        logger.debug(f"{type(e).__name__}: {e.message}")
        typer.echo(e.message)
        raise typer.Exit(code=e.exit_code)
