from sqlalchemy import Column, Integer, Date, Numeric, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
import enum
from models.audit_mixin import TimestampMixin


class EggGrade(enum.Enum):
    A = "A"
    B = "B"
    C = "C"


class EggProduction(Base, TimestampMixin):
    __tablename__ = "egg_production"

    # No uniqueness on (chicken_id, date): several entries per day are summed in reports
    id = Column(Integer, primary_key=True, index=True)
    chicken_id = Column(Integer, ForeignKey("chickens.id", ondelete="RESTRICT"), index=True, nullable=False)
    date = Column(Date, index=True, nullable=False)
    count = Column(Integer, nullable=False)
    weight = Column(Numeric(10, 3), nullable=True)
    quality = Column(Enum(EggGrade), default=EggGrade.A, nullable=False)
    notes = Column(Text, nullable=True)

    chicken = relationship("Chicken", back_populates="egg_production")
