"""Human-readable relative timestamps."""

from datetime import datetime

# Checked largest first; the first unit that fits at least once wins
_INTERVALS: list[tuple[str, int]] = [
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
]


def format_time_ago(created_at: datetime, now: datetime | None = None) -> str:
    """Format a timestamp as "X hours ago".

    Examples: "1 minute ago", "3 days ago", "Just now".

    Args:
        created_at: When the thing happened
        now: Reference time (defaults to the current time in created_at's timezone)

    Returns:
        Relative time label
    """
    if now is None:
        now = datetime.now(created_at.tzinfo)

    seconds = int((now - created_at).total_seconds())

    for unit, seconds_in_unit in _INTERVALS:
        interval = seconds // seconds_in_unit
        if interval >= 1:
            return f"{interval} {unit}{'s' if interval > 1 else ''} ago"

    return "Just now"
