import os
from datetime import date, datetime

import pytz
from dotenv import load_dotenv

load_dotenv()

FARM_TIMEZONE = pytz.timezone(os.getenv("FARM_TIMEZONE", "Asia/Jakarta"))


def farm_now() -> datetime:
    """Current timezone-aware time at the farm."""
    return datetime.now(FARM_TIMEZONE)


def farm_today() -> date:
    return farm_now().date()
