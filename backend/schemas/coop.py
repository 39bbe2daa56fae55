from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class CoopBase(BaseModel):
    name: str = Field(..., min_length=1)
    capacity: int = Field(..., ge=0)


class CoopCreate(CoopBase):
    pass


class CoopUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    capacity: Optional[int] = Field(None, ge=0)

    @field_validator('name', 'capacity')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class Coop(CoopBase):
    id: int
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
