import time


def now() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch.

    The sub-second part is rounded to the nearest millisecond.
    """
    seconds, nanoseconds = divmod(time.time_ns(), 1_000_000_000)
    return seconds * 1000 + round(nanoseconds / 1e6)
