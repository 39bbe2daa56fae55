from sqlalchemy import Column, Integer, String, Date, Numeric, Enum, ForeignKey
from database import Base
import enum
from models.audit_mixin import TimestampMixin


class SaleStatus(enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Sale(Base, TimestampMixin):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)
    date = Column(Date, index=True, nullable=False)
    egg_count = Column(Integer, nullable=False)
    price_per_unit = Column(Numeric(12, 2), nullable=False)
    # Persisted at write time as egg_count * price_per_unit; never recomputed on read
    total = Column(Numeric(14, 2), nullable=False)
    customer = Column(String, nullable=True)
    status = Column(Enum(SaleStatus), default=SaleStatus.PENDING, nullable=False)
