from typing import Optional


class ElapsedError(Exception):
    """Base class for errors that abort the current invocation.

    `exit_code` is the process status the CLI exits with after printing
    `message`.
    """

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(ElapsedError):
    exit_code = 1


class ConfigError(ElapsedError):
    exit_code = 1


class NoStartTime(ElapsedError):
    exit_code = 1

    def __init__(self, name: Optional[str] = None):
        suffix = f" for {name}" if name else ""
        super().__init__(f"No start-time set{suffix}")
        self.name = name


class TimerReadError(ElapsedError):
    exit_code = 1


class TimerWriteError(ElapsedError):
    exit_code = 1


class TimerNotStarted(ElapsedError):
    exit_code = 2

    def __init__(self, name: Optional[str] = None, verb: str = "started"):
        if name:
            message = f"Timer named '{name}' was not {verb}."
        else:
            message = f"Default (unnamed) timer was not {verb}."
        super().__init__(message)
        self.name = name


class CorruptTimer(ElapsedError):
    exit_code = 3

    def __init__(self, name: Optional[str] = None, size: int = 0):
        state = "empty" if size == 0 else "corrupted"
        super().__init__(
            f"{name or 'default'} start-timer found but is {state}. Timer removed."
        )
        self.name = name
        self.size = size
