from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class Profile(Base, TimestampMixin):
    __tablename__ = "profiles"

    # Subject ("sub" claim) issued by the auth provider
    id = Column(String, primary_key=True, index=True)
    email = Column(String, nullable=False)
    farm_name = Column(String, nullable=True)
    location = Column(String, nullable=True)

    coops = relationship("Coop", back_populates="owner")

    def __repr__(self):
        return f"<Profile(id={self.id}, email={self.email}, farm_name={self.farm_name})>"
