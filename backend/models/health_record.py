from sqlalchemy import Column, Integer, String, Date, Numeric, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
import enum
from models.audit_mixin import TimestampMixin


class HealthRecordType(enum.Enum):
    VACCINATION = "vaccination"
    TREATMENT = "treatment"
    CHECKUP = "checkup"


class HealthRecord(Base, TimestampMixin):
    __tablename__ = "health_records"

    id = Column(Integer, primary_key=True, index=True)
    chicken_id = Column(Integer, ForeignKey("chickens.id", ondelete="RESTRICT"), index=True, nullable=False)
    date = Column(Date, index=True, nullable=False)
    type = Column(Enum(HealthRecordType), nullable=False)
    description = Column(Text, nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    vet_name = Column(String, nullable=True)

    chicken = relationship("Chicken", back_populates="health_records")
