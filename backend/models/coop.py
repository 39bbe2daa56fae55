from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class Coop(Base, TimestampMixin):
    __tablename__ = "coops"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    capacity = Column(Integer, nullable=False)

    owner = relationship("Profile", back_populates="coops")
    chickens = relationship("Chicken", back_populates="coop", passive_deletes=True)
    feed_entries = relationship("Feed", back_populates="coop", passive_deletes=True)
