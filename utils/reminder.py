import math
from datetime import datetime, timedelta

import config


def effective_reminder(chosen: datetime, lead_time_hours: float) -> datetime:
    """Returns the notification time for a reminder chosen at `chosen`,
    moved earlier by the lead time (floored to whole seconds)."""
    try:
        offset_seconds = math.floor(lead_time_hours * config.SECONDS_PER_HOUR)
        return chosen - timedelta(seconds=offset_seconds)
    except (OverflowError, ValueError):
        # Not representable as a datetime; keep the unadjusted time.
        return chosen
