from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ProfileBase(BaseModel):
    farm_name: Optional[str] = None
    location: Optional[str] = None


class ProfileUpdate(ProfileBase):
    pass


class Profile(ProfileBase):
    id: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
