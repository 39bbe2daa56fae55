from sqlalchemy import Column, Integer, String, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
import enum
from models.audit_mixin import TimestampMixin


class ChickenStatus(enum.Enum):
    ACTIVE = "active"
    SOLD = "sold"
    DEAD = "dead"


class Chicken(Base, TimestampMixin):
    """A batch of birds tracked together from a shared birth date."""
    __tablename__ = "chickens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)
    coop_id = Column(Integer, ForeignKey("coops.id", ondelete="SET NULL"), index=True, nullable=True)
    batch_number = Column(String, nullable=False)
    breed = Column(String, nullable=False)
    initial_count = Column(Integer, nullable=False)
    current_count = Column(Integer, nullable=False)
    birth_date = Column(Date, nullable=False)
    status = Column(Enum(ChickenStatus), default=ChickenStatus.ACTIVE, nullable=False)

    coop = relationship("Coop", back_populates="chickens")
    egg_production = relationship("EggProduction", back_populates="chicken", passive_deletes=True)
    health_records = relationship("HealthRecord", back_populates="chicken", passive_deletes=True)
