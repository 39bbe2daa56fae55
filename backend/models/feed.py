from sqlalchemy import Column, Integer, String, Date, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class Feed(Base, TimestampMixin):
    __tablename__ = "feed"

    id = Column(Integer, primary_key=True, index=True)
    coop_id = Column(Integer, ForeignKey("coops.id", ondelete="RESTRICT"), index=True, nullable=False)
    date = Column(Date, index=True, nullable=False)
    type = Column(String, nullable=False)  # e.g. "layer mash", "grower pellets"
    quantity_kg = Column(Numeric(10, 3), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    notes = Column(Text, nullable=True)

    coop = relationship("Coop", back_populates="feed_entries")
