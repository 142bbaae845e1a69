import logging
import struct
from pathlib import Path
from typing import Callable, Optional

from omegaconf import DictConfig

from elapsed.errors import (
    CorruptTimer,
    NoStartTime,
    TimerNotStarted,
    TimerReadError,
    TimerWriteError,
    UsageError,
)
from elapsed.utils.clock import now

logger = logging.getLogger(__name__)

PAYLOAD_SIZE = 8


def resolve_path(name: Optional[str], config: DictConfig) -> Path:
    """
    Map a timer name to its file.

    Absolute names ("/var/run/job") are used as-is, other names live under
    `config.directory`, and no name means `config.default_name`. The
    extension is appended directly, so "/var/run/job" -> "/var/run/job.elapsed".
    """
    if name and len(name) > config.max_name_length:
        raise UsageError(
            f"Timer name exceeds {config.max_name_length} characters "
            "(Terminated, see -h for help)"
        )

    if name and name.startswith("/"):
        base = name
    elif name:
        base = f"{config.directory}/{name}"
    else:
        base = f"{config.directory}/{config.default_name}"
    return Path(f"{base}.{config.extension}")


class TimerStore:
    """
    File-backed named timers.

    Each timer is a file holding one signed 64-bit millisecond timestamp.
    A file of any other size is corrupt and gets removed when found.
    """

    def __init__(self, config: DictConfig, clock: Callable[[], int] = now):
        self.config = config
        self.clock = clock
        self._codec = struct.Struct(f"{config.byte_order.value}q")
        assert self._codec.size == PAYLOAD_SIZE

    def resolve(self, name: Optional[str] = None) -> Path:
        return resolve_path(name, self.config)

    def exists(self, name: Optional[str] = None) -> bool:
        path = self.resolve(name)
        try:
            size = path.stat().st_size
        except OSError:
            return False

        if size != PAYLOAD_SIZE:
            logger.debug(f"Removing corrupt timer '{path}' ({size} bytes)")
            self._remove(path)
            raise CorruptTimer(name, size)
        return True

    def start(self, name: Optional[str] = None) -> int:
        """Write the current instant to the timer file and return it."""
        path = self.resolve(name)
        instant = self.clock()
        try:
            with open(path, "wb") as f:
                f.write(self._codec.pack(instant))
        except OSError as e:
            raise TimerWriteError(
                f"Unable to write timer file '{path}': {e.strerror}"
            ) from e

        logger.debug(f"Started timer '{path}' at {instant}")
        return instant

    def read(self, name: Optional[str] = None) -> int:
        """Return the stored start instant, or 0 if the file came up short."""
        if not self.exists(name):
            raise TimerNotStarted(name)

        path = self.resolve(name)
        try:
            with open(path, "rb") as f:
                data = f.read(PAYLOAD_SIZE)
        except FileNotFoundError:
            # Removed between the size check and the open
            return 0
        except OSError as e:
            raise TimerReadError(
                f"Unable to read timer file '{path}': {e.strerror}"
            ) from e

        if len(data) < PAYLOAD_SIZE:
            return 0
        return self._codec.unpack(data)[0]

    def elapsed(self, name: Optional[str] = None) -> int:
        """Milliseconds since the timer was started."""
        start = self.read(name)
        if start == 0:
            raise NoStartTime(name)
        return self.clock() - start

    def stop(self, name: Optional[str] = None) -> None:
        if not self.exists(name):
            raise TimerNotStarted(name, verb="found")

        path = self.resolve(name)
        self._remove(path)
        logger.debug(f"Stopped timer '{path}'")

    def _remove(self, path: Path) -> None:
        try:
            if path.is_dir():
                path.rmdir()
            else:
                path.unlink(missing_ok=True)
        except OSError as e:
            raise TimerWriteError(
                f"Unable to remove timer file '{path}': {e.strerror}"
            ) from e
