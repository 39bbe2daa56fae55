from sqlalchemy import Column, DateTime
from utils.clock import farm_now


class TimestampMixin:
    """Mixin that provides created/updated timestamps.

    Timestamps are timezone-aware and taken in the farm's timezone
    (FARM_TIMEZONE). DateTime(timezone=True) ensures the timezone info is
    persisted in the database.
    """
    created_at = Column(DateTime(timezone=True), default=farm_now)
    updated_at = Column(DateTime(timezone=True), onupdate=farm_now)
