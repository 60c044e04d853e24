"""Pure time helpers used to display departures."""

from datetime import datetime, tzinfo

NOW_TEXT = "now"


def minutes_until(target: datetime, now: datetime) -> int:
    """Return whole minutes from now until target, never negative."""
    total_seconds = (target - now).total_seconds()
    return max(0, int(total_seconds // 60))


def format_minutes(minutes: int) -> str:
    """Format a minute count as compact text (e.g., 'now', '5 min', '1 h 5 min')."""
    if minutes <= 0:
        return NOW_TEXT
    if minutes == 1:
        return "1 min"
    if minutes >= 60:
        hours = minutes // 60
        mins = minutes % 60
        if mins == 0:
            return f"{hours} h"
        return f"{hours} h {mins} min"
    return f"{minutes} min"


def format_clock_time(instant: datetime, tz: tzinfo | None = None) -> str:
    """Format an instant as 24-hour HH:MM.

    Args:
        instant: The instant to format.
        tz: Timezone to display in. System local time when None.

    Returns:
        Clock time like "14:05".
    """
    return instant.astimezone(tz).strftime("%H:%M")
