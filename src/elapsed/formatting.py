MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def _unit(value: int, label: str) -> str:
    return f"{value} {label}" if value == 1 else f"{value} {label}s"


def format_elapsed(ms: int, newline: bool = True) -> str:
    """
    Render a millisecond duration as e.g. "1 day 0 hours 17 minutes 54.941 seconds".

    Days, hours and minutes appear once they or a larger unit are non-zero;
    seconds are always shown with a millisecond fraction.
    """
    ms = max(ms, 0)

    seconds = ms // MS_PER_SECOND % 60
    minutes = ms // MS_PER_MINUTE % 60
    hours = ms // MS_PER_HOUR % 24
    days = ms // MS_PER_DAY

    parts = []
    if days > 0:
        parts.append(_unit(days, "day"))
    if days > 0 or hours > 0:
        parts.append(_unit(hours, "hour"))
    if days > 0 or hours > 0 or minutes > 0:
        parts.append(_unit(minutes, "minute"))
    parts.append(f"{seconds}.{ms % MS_PER_SECOND:03d} seconds")

    text = " ".join(parts)
    return text + "\n" if newline else text
