import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from elapsed.errors import UsageError
from elapsed.formatting import format_elapsed
from elapsed.store import TimerStore

logger = logging.getLogger(__name__)

Echo = Callable[..., None]


class Action(str, Enum):
    START = "START"
    SHOW = "SHOW"
    STOP = "STOP"


def parse_action(token: str) -> Action:
    """Case-insensitive lookup of an action token."""
    command = token.upper()
    try:
        return Action(command)
    except ValueError:
        raise UsageError(
            f"Unknown command: {command} (Terminated, see -h for help)"
        ) from None


@dataclass(frozen=True)
class Invocation:
    action: Action
    timer_name: Optional[str] = None
    suppress_newline: bool = False
    restart: bool = False


def show(store: TimerStore, invocation: Invocation, echo: Echo) -> None:
    ms = store.elapsed(invocation.timer_name)
    echo(format_elapsed(ms, newline=not invocation.suppress_newline), nl=False)
    if invocation.restart:
        store.start(invocation.timer_name)


def dispatch(store: TimerStore, invocation: Invocation, echo: Echo) -> None:
    """Run one invocation. Errors propagate as `ElapsedError` subclasses."""
    logger.debug(f"Dispatching {invocation}")

    if invocation.action is Action.START:
        store.start(invocation.timer_name)
    elif invocation.action is Action.SHOW:
        show(store, invocation, echo)
    elif invocation.action is Action.STOP:
        store.stop(invocation.timer_name)
