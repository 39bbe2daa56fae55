import enum
from datetime import date, timedelta
from typing import Optional, Tuple

from utils.clock import farm_today

# Lower bound used for the all-time window so every window shares one query shape
ALL_TIME_START = date(1, 1, 1)


class ReportWindow(str, enum.Enum):
    SEVEN_DAY = "seven_day"
    THIRTY_DAY = "thirty_day"
    ALL_TIME = "all_time"


WINDOW_DAYS = {
    ReportWindow.SEVEN_DAY: 7,
    ReportWindow.THIRTY_DAY: 30,
}


def window_bounds(window: ReportWindow, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Map a report window to an inclusive (start, end) pair.

    `today` defaults to the farm's current date, evaluated on every call.
    """
    end = today or farm_today()
    if window == ReportWindow.ALL_TIME:
        return ALL_TIME_START, end
    return end - timedelta(days=WINDOW_DAYS[window]), end
