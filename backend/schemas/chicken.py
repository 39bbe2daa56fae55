from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime
from models.chicken import ChickenStatus


class ChickenBase(BaseModel):
    coop_id: Optional[int] = None
    batch_number: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    initial_count: int = Field(..., ge=0)
    birth_date: date
    status: ChickenStatus = ChickenStatus.ACTIVE


class ChickenCreate(ChickenBase):
    # Defaults to initial_count when omitted
    current_count: Optional[int] = Field(None, ge=0)


class ChickenUpdate(BaseModel):
    coop_id: Optional[int] = None
    batch_number: Optional[str] = Field(None, min_length=1)
    breed: Optional[str] = Field(None, min_length=1)
    initial_count: Optional[int] = Field(None, ge=0)
    current_count: Optional[int] = Field(None, ge=0)
    birth_date: Optional[date] = None
    status: Optional[ChickenStatus] = None

    @field_validator('batch_number', 'breed', 'initial_count', 'current_count', 'birth_date', 'status')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class Chicken(ChickenBase):
    id: int
    user_id: str
    current_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
